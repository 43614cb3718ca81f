import argparse
import sys

import requests

from webget.config import ConfigError, load_settings
from webget.download import download


def build_parser():
    parser = argparse.ArgumentParser(prog="webget", description="Downloads the given uri")
    parser.add_argument("uri", help="URI to download")
    parser.add_argument(
        "-f",
        "--filename",
        help="Optional filename, otherwise will be taken from response or uri",
    )
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings()
        download(args.uri, args.filename, settings)
    except (ConfigError, OSError, requests.exceptions.RequestException) as e:
        print(f"\nError: {e}", file=sys.stderr)
        return 1

    return 0


def run():
    sys.exit(main())
