"""Argument parsing functionality for the documentation router CLI."""

import argparse
from constants import Constants


def _add_common_options(parser):
    parser.add_argument("-f", "--channels-file",
                        dest="CHANNELS_FILE",
                        help="Channels file (JSON or YAML) describing groups, channels and versions "
                             f"(default: ${Constants.ENV_PATH_CHANNELS_FILE} or {Constants.DEFAULT_CHANNELS_FILE})",
                        action="store",
                        type=str)
    parser.add_argument("-c", "--config",
                        dest="CONFIG",
                        help="Path to router configuration file (YAML)",
                        action="store",
                        type=str)
    parser.add_argument("--versions-root",
                        dest="VERSIONS_ROOT",
                        help=f"URL location of versioned docs (default: {Constants.DEFAULT_VERSIONS_ROOT})",
                        action="store",
                        type=str)
    parser.add_argument("--default-group",
                        dest="DEFAULT_GROUP",
                        help=f"Group served when the URL names none (default: {Constants.DEFAULT_GROUP})",
                        action="store",
                        type=str)
    parser.add_argument("--default-channel",
                        dest="DEFAULT_CHANNEL",
                        help="Default channel threshold for group resolution",
                        action="store",
                        type=str.lower,
                        choices=Constants.THRESHOLDS)
    parser.add_argument("--show-latest",
                        dest="SHOW_LATEST",
                        help="Append the 'latest' pseudo-channel to menus",
                        action="store_true")
    parser.add_argument("--i18n-type",
                        dest="I18N_TYPE",
                        help="How the request language is determined",
                        action="store",
                        type=str.lower,
                        choices=Constants.I18N_TYPES)
    parser.add_argument("--loglevel",
                        dest="LOG_LEVEL",
                        help="Set the logging level",
                        action="store",
                        type=str.upper,
                        choices=Constants.LOG_LEVELS)


def parse_args(argv=None):
    """Parses the arguments passed to the program."""
    parser = argparse.ArgumentParser(
        prog="docrouter",
        description="Resolve documentation version tokens against release channels",
        add_help=True,
    )
    sub = parser.add_subparsers(dest="COMMAND", metavar="command")
    sub.required = True

    resolve = sub.add_parser("resolve", help="Resolve a group (and optional channel) to a version")
    resolve.add_argument("group", help="Release group, e.g. v1 or v1.2")
    resolve.add_argument("channel", nargs="?", help="Exact channel instead of the stability cascade")

    reverse = sub.add_parser("reverse", help="Find the channel and group publishing a version")
    reverse.add_argument("version", help="Version or bare group, e.g. v1.2.3+fix6 or v2")

    decompose = sub.add_parser("decompose", help="Split a request URI into language, version and page")
    decompose.add_argument("uri", help="Request URI, e.g. /en/documentation/v1.2.3-plus-fix6/page.html")

    menu = sub.add_parser("menu", help="Build the navigation menu for a request URI")
    menu.add_argument("uri", help="Request URI the menu is rendered for")
    menu.add_argument("-k", "--kind",
                      dest="MENU_KIND",
                      help="Menu to build (default: version)",
                      action="store",
                      type=str.lower,
                      choices=Constants.MENU_KINDS,
                      default="version")

    sub.add_parser("status", help="Report the loaded release channels")

    encode = sub.add_parser("encode", help="Encode a version for use in a URL")
    encode.add_argument("value")
    decode = sub.add_parser("decode", help="Decode a URL segment back to a version")
    decode.add_argument("value")

    for subparser in sub.choices.values():
        _add_common_options(subparser)

    return parser.parse_args(argv)
