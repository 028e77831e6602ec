# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import json
import os
import sys

from ._version import __version__

HELP_MESSAGE_VERBOSE = ("Usage: richdelta [OPTIONS]\n\n"
                        "OPTIONS: -h, --help, --version, --config\n\n"
                        "Examples: richdelta --version\n"
                        "          richdelta --config\n")


def modify_config_for_print(config):
    output = {}
    for k, v in config.items():
        if isinstance(v, dict):
            output[k] = modify_config_for_print(v)
            if not output[k]:
                output[k] = '{}'
        else:
            output[k] = json.dumps(v)
    return output


def print_config(out):
    """List all config options and their current values."""
    from .config import build_config, entrypoint_configurables
    from .prettyprint import pretty_print_dict, PrettyPrintConfig
    print('All available config options, and their current values:\n',
          file=out)
    for entrypoint, cls in entrypoint_configurables.items():
        config = build_config(entrypoint, True)
        pretty_print_dict({
                cls.__name__: modify_config_for_print(config),
            },
            config=PrettyPrintConfig(out=out)
        )
        print('', file=out)


def main_dispatch(args=None):
    if args is None:
        args = sys.argv[1:]
    if len(args) < 1:
        sys.exit("Option missing.\n\n%s" % HELP_MESSAGE_VERBOSE)

    cmd = args[0]
    if cmd == '--version':
        print(__version__)
        return 0
    if cmd == '-h' or cmd == '--help':
        print(HELP_MESSAGE_VERBOSE)
        return 0
    if cmd == '--config':
        from .config import build_config, config_search_path
        from .log import init_logging, info
        init_logging(level=build_config('richdelta')['log_level'])
        info("Reading richdelta_config.json from %s", os.pathsep.join(config_search_path()))
        print_config(sys.stdout)
        return 0
    sys.exit("Unrecognized command '%s'\n\n%s" % (cmd, HELP_MESSAGE_VERBOSE))


if __name__ == "__main__":
    # This is triggered by "python -m richdelta <args>"
    sys.exit(main_dispatch())
