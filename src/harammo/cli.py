#!/usr/bin/env python3
"""
HarAmmo - convert HAR archives into raw HTTP request ammo

Usage:
    har2ammo -i session.har -o ammo.txt
    har2ammo -i session.har -c config.yaml -H api.example.com > ammo.txt
"""

import argparse
import logging
import sys

from .common import HarAmmoError
from .convert import ConvertOptions, HarConverter, DEFAULT_CONFIG, FileSink, CallbackSink


# ============================================================================
# COMMAND-LINE INTERFACE
# ============================================================================

def parse_args(argv=None):
    """
    Parse command-line arguments.

    Returns:
        Namespace object with parsed arguments
    """
    parser = argparse.ArgumentParser(
        description="HarAmmo - convert HAR files into size-prefixed raw HTTP requests",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s -i session.har
  %(prog)s -i session.har -o ammo.txt

  # Keep only requests to one host
  %(prog)s -i session.har -H "api\\.example\\.com" -o ammo.txt

  # Cookies, custom headers and path filters from a config file
  %(prog)s -i session.har -c config.yaml -o ammo.txt

Config file keys (JSON or YAML):
  host, pathFilterRegexp, customCookies, clearCookies, customHeaders, autoTag
        """
    )

    parser.add_argument(
        '-i', '--input',
        required=True,
        metavar='PATH',
        help='HAR file to convert'
    )

    parser.add_argument(
        '-c', '--config',
        default=None,
        metavar='PATH',
        help='Config file (JSON or YAML) merged over the defaults'
    )

    parser.add_argument(
        '-H', '--host',
        default=None,
        metavar='HOST',
        help='Target host regex, overrides the config file and the first entry'
    )

    parser.add_argument(
        '-o', '--output',
        default=None,
        metavar='PATH',
        help='Write requests to this file instead of stdout'
    )

    parser.add_argument(
        '--log-level',
        default='warning',
        choices=['debug', 'info', 'warning', 'error'],
        help='Log level (default: warning)'
    )

    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Show filtering decisions (same as --log-level debug)'
    )

    return parser.parse_args(argv)


def _write_stdout(error, data=None):
    sys.stdout.write(data)
    sys.stdout.flush()


# ============================================================================
# MAIN ENTRY POINT
# ============================================================================

def main(argv=None):
    """
    Main entry point for HarAmmo.

    Requests go to stdout unless --output is given, so status messages
    are printed to stderr.
    """
    args = parse_args(argv)

    level = 'debug' if args.verbose else args.log_level
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format='%(levelname)s %(name)s: %(message)s',
        stream=sys.stderr
    )

    options = ConvertOptions(
        input=args.input,
        config=args.config,
        host=args.host,
        output=args.output
    )

    if options.output:
        sink = FileSink(options.output)
    else:
        sink = CallbackSink(_write_stdout)

    try:
        count = HarConverter(options, dict(DEFAULT_CONFIG)).run(sink)
    except HarAmmoError as e:
        print(f"❌ {e}", file=sys.stderr)
        sys.exit(1)

    if options.output:
        print(f"✅ Wrote {count} requests to {options.output}", file=sys.stderr)


if __name__ == '__main__':
    main()
