#!/usr/bin/env python3
"""
Validate and upload locale documents to the Cloudflare KV namespace.

Each locales/{locale}.json is stored whole under i18n:{locale}:{brand}.

Usage:
    python scripts/upload_locales.py validate
    python scripts/upload_locales.py upload [--dry-run]
    python scripts/upload_locales.py list

Environment variables required (upload, list):
    CLOUDFLARE_ACCOUNT_ID - Cloudflare account id
    CLOUDFLARE_API_TOKEN - API token with KV write access
    CLOUDFLARE_KV_NAMESPACE_ID - Namespace holding locale documents
"""

import argparse
import asyncio
import json
import os
import sys
from typing import Dict, List, Optional, Sequence, Tuple

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv

from common.storage import CloudflareKVStore, KeyValueStore, StoreError
from config.i18n_config import LOCALE_KEY_TEMPLATE
from astropal.locale import ValidationReport, validate_locale_data

# Load environment variables
load_dotenv()


def load_locale_file(locales_dir: str, locale: str) -> Tuple[Optional[dict], Optional[str]]:
    """Read one locale file. Returns (data, error)."""
    path = os.path.join(locales_dir, f"{locale}.json")
    if not os.path.exists(path):
        return None, f"{locale}: locale file not found: {path}"
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f), None
    except (OSError, json.JSONDecodeError) as e:
        return None, f"{locale}: invalid JSON in {path}: {e}"


def validate_locales(locales_dir: str, locales: Sequence[str]) -> Dict[str, ValidationReport]:
    """Validate every locale file and print a summary per locale."""
    reports: Dict[str, ValidationReport] = {}
    for locale in locales:
        data, error = load_locale_file(locales_dir, locale)
        if error:
            report = ValidationReport(locale=locale, errors=[error])
        else:
            report = validate_locale_data(locale, data)
        reports[locale] = report

        status = "OK" if report.is_valid else "FAILED"
        print(f"{locale}: {status} ({len(report.errors)} errors, {len(report.warnings)} warnings)")
        for message in report.errors:
            print(f"  ERROR: {message}")
        for message in report.warnings:
            print(f"  WARNING: {message}")
    return reports


async def upload_locales(
    store: KeyValueStore,
    locales_dir: str,
    locales: Sequence[str],
    brand: str,
    dry_run: bool = False,
) -> List[str]:
    """
    Validate, then upload every valid locale document.

    Returns:
        Keys that were written (or would be written with dry_run)
    """
    reports = validate_locales(locales_dir, locales)
    uploaded = []

    for locale in locales:
        if not reports[locale].is_valid:
            print(f"Skipping {locale}: validation failed")
            continue

        data, _ = load_locale_file(locales_dir, locale)
        key = LOCALE_KEY_TEMPLATE.format(locale=locale, brand=brand)

        if dry_run:
            print(f"[dry-run] Would upload {locale} to {key}")
            uploaded.append(key)
            continue

        try:
            await store.put(key, data)
        except StoreError as e:
            print(f"ERROR: Failed to upload {locale}: {e}")
            continue
        print(f"Uploaded {locale} to {key}")
        uploaded.append(key)

    return uploaded


async def list_locale_keys(store: KeyValueStore, prefix: str = "i18n:") -> List[str]:
    keys = await store.list_keys(prefix)
    for key in keys:
        print(key)
    print(f"{len(keys)} key(s)")
    return keys


def create_store(settings) -> CloudflareKVStore:
    missing = [
        name
        for name in ("CLOUDFLARE_ACCOUNT_ID", "CLOUDFLARE_API_TOKEN", "CLOUDFLARE_KV_NAMESPACE_ID")
        if not getattr(settings, name)
    ]
    if missing:
        print(f"ERROR: {', '.join(missing)} environment variable(s) not set")
        sys.exit(1)
    return CloudflareKVStore(
        account_id=settings.CLOUDFLARE_ACCOUNT_ID,
        namespace_id=settings.CLOUDFLARE_KV_NAMESPACE_ID,
        api_token=settings.CLOUDFLARE_API_TOKEN,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Manage Astropal locale documents in Cloudflare KV")
    parser.add_argument("--locales-dir", help="Directory holding {locale}.json files")
    parser.add_argument("--brand", help="Brand suffix of store keys")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("validate", help="Validate locale files")
    upload = subparsers.add_parser("upload", help="Validate and upload locale files")
    upload.add_argument("--dry-run", action="store_true", help="Print what would be uploaded")
    subparsers.add_parser("list", help="List locale keys in the namespace")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    from astropal.config import Settings

    args = build_parser().parse_args(argv)
    settings = Settings()
    locales_dir = args.locales_dir or settings.LOCALES_DIR
    brand = args.brand or settings.BRAND
    locales = settings.get_supported_locales()

    print(f"Brand: {brand}")
    print(f"Locales: {', '.join(locales)}")

    if args.command == "validate":
        reports = validate_locales(locales_dir, locales)
        return 0 if all(r.is_valid for r in reports.values()) else 1

    if args.command == "upload":
        store = None if args.dry_run else create_store(settings)
        uploaded = asyncio.run(
            upload_locales(store, locales_dir, locales, brand, dry_run=args.dry_run)
        )
        return 0 if len(uploaded) == len(locales) else 1

    asyncio.run(list_locale_keys(create_store(settings)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
