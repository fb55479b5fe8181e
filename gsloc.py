#!/usr/bin/env python3
import argparse
import logging

from dotenv import load_dotenv

from common import setup_logging
from config import DEFAULT_CONFIG_PATH, generate_config_example, load_config
from errors import GslocError
from gen_loc import gen_loc

# third-party loggers kept at INFO under --verbose
QUIET_LOGGERS = ('gspread', 'google', 'urllib3', 'requests')


def cmd_gen_loc(args) -> None:
    config = load_config(args.config)
    gen_loc(config)


def cmd_gen_config_example(args) -> None:
    path = generate_config_example(args.output)
    logging.info('Config file generated successfully: %s', path)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog='gsloc',
        description='gsloc is a tool to generate localization files from google spreadsheets',
    )
    p.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    p.add_argument('--log-file', help='Also write log output to this file')

    # same flags after the subcommand; SUPPRESS keeps the top-level value when absent
    logging_opts = argparse.ArgumentParser(add_help=False)
    logging_opts.add_argument('-v', '--verbose', action='store_true', default=argparse.SUPPRESS,
                              help='Enable debug logging')
    logging_opts.add_argument('--log-file', default=argparse.SUPPRESS,
                              help='Also write log output to this file')

    sub = p.add_subparsers(dest='command')

    gen = sub.add_parser('gen-loc', parents=[logging_opts],
                         help='Generate localization files from google spreadsheets')
    gen.add_argument('-c', '--config', default=DEFAULT_CONFIG_PATH,
                     help=f'Path to the YAML config (default {DEFAULT_CONFIG_PATH})')
    gen.set_defaults(func=cmd_gen_loc)

    example = sub.add_parser('gen-config-example', parents=[logging_opts],
                             help='Generate an example config file')
    example.add_argument('-o', '--output', default=DEFAULT_CONFIG_PATH,
                         help=f'Where to write the example (default {DEFAULT_CONFIG_PATH})')
    example.set_defaults(func=cmd_gen_config_example)
    return p


def main(argv=None):
    load_dotenv()
    p = build_parser()
    args = p.parse_args(argv)
    # library modules log through the root logger
    log = setup_logging('', args.log_file, verbose=args.verbose)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.INFO)

    if not args.command:
        p.print_help()
        exit(1)

    try:
        args.func(args)
    except GslocError as e:
        log.error('%s failed: %s', args.command, e)
        exit(1)


if __name__ == '__main__':
    main()
