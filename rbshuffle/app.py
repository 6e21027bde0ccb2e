import logging
import os
import random
import sys
from datetime import date

from rbshuffle.constants import SHUFFLED_NAME_FORMAT, SHUFFLED_NUMBER_LIMIT
from rbshuffle.lib.args import ArgsNamespace, parse_args
from rbshuffle.lib.display import display_playlist
from rbshuffle.lib.errors import RbShuffleError
from rbshuffle.lib.logger import configure_logger
from rbshuffle.lib.playlist_document import Playlist, PlaylistDocument
from rbshuffle.lib.preference_manager import PreferenceManager
from rbshuffle.lib.reorder import reorder, seeded_random


def shuffled_name(name: str, rng: random.Random, today: date | None = None) -> str:
    """Name for a reordered copy, e.g. ``Road trip_SHUFFLED_2024-05-01_1234567``."""
    if today is None:
        today = date.today()
    number = rng.randrange(SHUFFLED_NUMBER_LIMIT)
    return SHUFFLED_NAME_FORMAT.format(name=name, date=today, number=number)


def reorder_playlist(playlist: Playlist, settings: dict, rng: random.Random) -> list[str]:
    if settings["display"]:
        display_playlist(playlist, show_locations=settings["display_all"])
    return reorder(
        playlist.locations,
        shuffle_groups=settings["shuffle_dirs"],
        shuffle_within_group=settings["shuffle_in_dir"],
        rng=rng,
    )


def process_document(doc: PlaylistDocument, settings: dict, rng: random.Random) -> int:
    """Reorder the static playlists of a document according to ``settings``.

    In place mode reorders every static playlist. Otherwise the first static
    playlist is copied under a new name with its tracks reordered, and the
    copy is appended to the document.

    Returns:
        int: The number of playlists written to the document.
    """
    if settings["in_place"]:
        playlists = doc.static_playlists
        for playlist in playlists:
            playlist.set_locations(reorder_playlist(playlist, settings, rng))
            logging.info(f"Reordered playlist in place: {playlist.name}")
        if not playlists:
            logging.warning("No static playlist found, nothing to reorder")
        return len(playlists)

    playlist = doc.first_static()
    if playlist is None:
        logging.warning("No static playlist found, nothing to reorder")
        return 0

    locations = reorder_playlist(playlist, settings, rng)
    new_playlist = playlist.copy(shuffled_name(playlist.name, rng))
    new_playlist.set_locations(locations)
    doc.append(new_playlist)
    logging.info(f"Added reordered copy of {playlist.name}: {new_playlist.name}")
    return 1


def run(args: ArgsNamespace) -> PlaylistDocument:
    """Run one reorder pass as described by the parsed command line.

    Raises:
        RbShuffleError: On any fatal condition. Nothing is written in that case.
    """
    preferences = PreferenceManager(args.config_file_path)
    settings = preferences.resolve(
        persist=args.save_preferences,
        playlists_path=args.playlists_path,
        shuffle_dirs=args.shuffle_dirs,
        shuffle_in_dir=args.shuffle_in_dir,
        in_place=args.in_place,
        display=args.display,
        display_all=args.display_all,
    )
    logging.debug(f"Settings: {settings}")

    rng = seeded_random()
    doc = PlaylistDocument.load(os.path.expanduser(str(settings["playlists_path"])))
    process_document(doc, settings, rng)

    if args.out is not None:
        doc.write(args.out)
    else:
        logging.info("No output file given, the playlists were not written")
    return doc


def main(argv=None):
    args = parse_args(argv)

    configure_logger(args.log_level, args.log_dir, args.max_log_files)

    try:
        run(args)
    except RbShuffleError as e:
        logging.error(e)
        sys.exit(1)


if __name__ == "__main__":
    main()
