#!/usr/bin/env python

import argparse
import json
import logging
import os
import sys

import dotenv

dotenv.load_dotenv()

# https://stackoverflow.com/questions/16981921
SCRIPT_PATH = os.path.realpath(os.path.join(os.getcwd(), os.path.expanduser(__file__)))
sys.path.append(os.path.dirname(os.path.dirname(SCRIPT_PATH)))
from receipt_validator import Endpoint, ReceiptValidator  # noqa E402
from receipt_validator.logging import configure_logging  # noqa E402


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Verify an App Store receipt with apple')
    parser.add_argument('-f', dest='receipt_path', required=True, help='file holding the receipt data')
    parser.add_argument(
        '-s',
        dest='shared_secret',
        default=os.environ.get('APPSTORE_SHARED_SECRET'),
        help='app shared secret, required for auto-renewable subscriptions',
    )
    parser.add_argument('--sandbox', action='store_true', help='verify against the sandbox endpoint')
    parser.add_argument(
        '--exclude-old-transactions',
        action='store_true',
        help='only include the latest renewal transaction of each subscription',
    )
    parser.add_argument('-v', dest='verbose', action='store_true', help='log each request made')
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)

    with open(args.receipt_path) as fh:
        receipt_data = fh.read().strip()

    validator = ReceiptValidator(
        endpoint=Endpoint.SANDBOX if args.sandbox else Endpoint.PRODUCTION,
        shared_secret=args.shared_secret,
        exclude_old_transactions=args.exclude_old_transactions,
    )
    response = validator.validate(receipt_data)

    summary = {
        'status': response.result_code,
        'category': response.category,
        'environment': response.environment,
        'bundleId': response.bundle_id,
        'latestExpiresAt': response.latest_expires_at.isoformat() if response.latest_expires_at else None,
    }
    print(json.dumps(summary, indent=2))
    return 0 if response.is_valid else 1


if __name__ == '__main__':
    sys.exit(main())
