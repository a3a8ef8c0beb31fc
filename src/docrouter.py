"""docrouter - resolve documentation version tokens against release channels.

    Returns:
        int: Exit code
"""
import json
import logging
import os
import sys

from constants import ExitCodes, Constants
from common.logging_utils import configure_logging, extra_context, is_debug_enabled
from args import parse_args

# Imports support both source and installed modes:
# - Source/tests: import via src.*
# - Installed console script: import via top-level packages
try:
    from src.versioning import (
        ConfigError,
        LoadError,
        ResolutionError,
        TopologyStore,
        decode_version,
        encode_version,
        resolve_channel_group_version,
        resolve_group_version,
        reverse_resolve,
    )
    from src.routing import RequestPathDecomposer, RouterConfig, build_menu, status_report
except ImportError:  # Fall back when 'src' package is not available
    from versioning import (
        ConfigError,
        LoadError,
        ResolutionError,
        TopologyStore,
        decode_version,
        encode_version,
        resolve_channel_group_version,
        resolve_group_version,
        reverse_resolve,
    )
    from routing import RequestPathDecomposer, RouterConfig, build_menu, status_report

logger = logging.getLogger(__name__)

_TOPOLOGY_COMMANDS = ("resolve", "reverse", "menu", "status")


def load_config(args):
    """Environment, then optional config file, then CLI flags (highest precedence).

    Raises:
        ConfigError: If the resulting configuration is invalid.
    """
    config = RouterConfig.from_env()
    if getattr(args, "CONFIG", None):
        config = RouterConfig.from_yaml(args.CONFIG, config)
    return RouterConfig.from_args(args, config).validate()


def _emit(payload):
    sys.stdout.write(json.dumps(payload, indent=2, ensure_ascii=False) + "\n")


def run_command(args, config):
    """Execute one subcommand and return its exit code."""
    command = args.COMMAND

    if command == "encode":
        sys.stdout.write(encode_version(args.value) + "\n")
        return ExitCodes.SUCCESS.value
    if command == "decode":
        sys.stdout.write(decode_version(args.value) + "\n")
        return ExitCodes.SUCCESS.value

    decomposer = RequestPathDecomposer(config.versions_root, config.languages)
    if command == "decompose":
        context = decomposer.decompose(args.uri)
        _emit({
            "language": context.language,
            "versionToken": context.version_token,
            "relativePagePath": context.relative_page_path,
            "rawVersionURLSegment": context.raw_version_url_segment,
            "pagePath": context.page_path,
        })
        return ExitCodes.SUCCESS.value

    store = TopologyStore()
    try:
        store.refresh_from_file(config.channels_file)
    except LoadError as exc:
        if command != "status":
            logging.error("%s", exc)
            return ExitCodes.FILE_ERROR.value

    if command == "status":
        report = status_report(store, config)
        _emit(report)
        return ExitCodes.SUCCESS.value if report["status"] == "ok" else ExitCodes.FILE_ERROR.value

    topology = store.snapshot()
    if command == "reverse":
        channel, group = reverse_resolve(topology, args.version)
        _emit({"version": args.version, "channel": channel, "group": group})
        return ExitCodes.SUCCESS.value

    if command == "menu":
        menu = build_menu(topology, decomposer.decompose(args.uri), args.MENU_KIND, config)
        _emit(menu.to_dict())
        return ExitCodes.SUCCESS.value

    # resolve
    try:
        if args.channel:
            version = resolve_channel_group_version(topology, args.channel, args.group)
        else:
            version = resolve_group_version(topology, args.group, config.threshold)
    except ResolutionError as exc:
        logging.error("%s", exc)
        return ExitCodes.RESOLUTION_ERROR.value
    _emit({
        "group": args.group,
        "channel": args.channel or "",
        "version": version,
        "versionURL": encode_version(version),
    })
    return ExitCodes.SUCCESS.value


def main(argv=None):
    """Main function of the program."""
    args = parse_args(argv)
    # Honor CLI --loglevel by passing it to centralized logger via env
    if getattr(args, "LOG_LEVEL", None):
        os.environ[Constants.ENV_LOG_LEVEL] = str(args.LOG_LEVEL).upper()
    configure_logging()

    try:
        config = load_config(args)
    except ConfigError as exc:
        logging.error("%s", exc)
        return ExitCodes.CONFIG_ERROR.value
    logging.getLogger().setLevel(getattr(logging, config.log_level, logging.WARNING))

    if is_debug_enabled(logger):
        logger.debug(
            "CLI start",
            extra=extra_context(
                event="function_entry",
                component="cli",
                action=args.COMMAND,
                channels_file=config.channels_file if args.COMMAND in _TOPOLOGY_COMMANDS else None,
                default_group=config.default_group,
                default_channel=config.default_channel,
            )
        )

    return run_command(args, config)


if __name__ == "__main__":
    sys.exit(main())
