#!/usr/bin/env python3
"""Validate environment configuration before startup."""
import json
import os
import sys
from pathlib import Path

LOG_LEVELS = {"debug", "info", "warning", "error", "critical"}


def validate():
    """Validate dataset, media and server settings."""
    errors = []
    warnings = []

    # Dataset must exist and be a JSON array with an unorganized album
    dataset_path = Path(os.getenv("DATASET_PATH", "dataset/discography.json"))
    if not dataset_path.exists():
        errors.append(f"DATASET_PATH does not exist: {dataset_path}")
    else:
        try:
            records = json.loads(dataset_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            errors.append(f"DATASET_PATH is not valid JSON: {e}")
        else:
            if not isinstance(records, list):
                errors.append("Dataset must be a JSON array of albums")
            else:
                ids = [r.get("ID") for r in records if isinstance(r, dict)]
                if len(ids) != len(records) or None in ids:
                    errors.append("Every dataset entry must be an album with an ID")
                if ids.count(0) == 0:
                    warnings.append("Dataset has no unorganized album (ID 0) - /addSong without album will fail")
                elif ids.count(0) > 1:
                    warnings.append("Dataset has more than one album with ID 0")

    # Cover images
    images_dir = Path(os.getenv("IMAGES_DIR", "media/images"))
    default_cover = os.getenv("DEFAULT_COVER", "default.png")
    if not images_dir.is_dir():
        warnings.append(f"IMAGES_DIR is not a directory: {images_dir}")
    elif not (images_dir / default_cover).is_file():
        warnings.append(f"Default cover missing: {images_dir / default_cover}")

    # Server port (PORT, then NODE_PORT)
    port = os.getenv("PORT") or os.getenv("NODE_PORT")
    if port and not (port.isdigit() and 0 < int(port) < 65536):
        errors.append(f"PORT is not a valid port number: {port}")

    log_level = os.getenv("LOG_LEVEL", "info")
    if log_level.lower() not in LOG_LEVELS:
        warnings.append(f"LOG_LEVEL '{log_level}' is unknown - falling back to info")

    itunes_url = os.getenv("ITUNES_SEARCH_URL", "")
    if itunes_url and not itunes_url.startswith("https://"):
        warnings.append("ITUNES_SEARCH_URL is not https")

    if os.getenv("CORS_ORIGINS", "*") == "*":
        warnings.append("CORS_ORIGINS allows any origin - set your domain(s) for production")

    # Report results
    print("=" * 60)
    print("Discography Environment Validation")
    print("=" * 60)

    if errors:
        print("\nERRORS:")
        for error in errors:
            print(f"  [X] {error}")

    if warnings:
        print("\nWARNINGS:")
        for warning in warnings:
            print(f"  [!] {warning}")

    if not errors and not warnings:
        print("\n  All checks passed.")

    print("\n" + "=" * 60)

    if errors:
        print("RESULT: Configuration INVALID - fix errors before starting")
        sys.exit(1)

    if warnings:
        print("RESULT: Configuration valid with warnings")
    else:
        print("RESULT: Configuration valid")

    sys.exit(0)


if __name__ == "__main__":
    validate()
