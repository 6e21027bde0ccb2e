import os

PACKAGE_NAME = "rbshuffle"

# Rhythmbox keeps its playlists here, relative to the user's home directory
RHYTHMBOX_PLAYLISTS_REL_PATH = os.path.join(".local", "share", "rhythmbox", "playlists.xml")

# Name given to a reordered copy: <original>_SHUFFLED_<YYYY-MM-DD>_<n>
SHUFFLED_NAME_FORMAT = "{name}_SHUFFLED_{date:%Y-%m-%d}_{number}"
SHUFFLED_NUMBER_LIMIT = 1 << 24
