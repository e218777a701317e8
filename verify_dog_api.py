#!/usr/bin/env python3
"""
Verification script for the dog image client setup.

This script checks:
1. .env file exists (optional; variables may be exported instead)
2. Environment variables are set
3. The base URL is usable
4. API connectivity: one random image and the favourites listing (optional)
"""

import sys

from thedog.infrastructure.dog_api_client import DogAPIError, DogImageClient
from thedog.utils.config import (
    dog_api_base_url,
    dog_api_key,
    dog_api_timeout,
    project_root,
)
from thedog.utils.logger import setup_logger


def check_env_file() -> tuple[bool, str]:
    """Check whether a .env file exists at the project root."""
    env_path = project_root() / ".env"
    if env_path.is_file():
        return True, f"[OK] .env file found: {env_path}"
    return False, f"[!] No .env file at {env_path} (exported variables are used instead)"


def check_env_vars() -> tuple[bool, list[str]]:
    """Check that the API key is set and report the optional settings."""
    results = []
    all_ok = True

    try:
        key = dog_api_key()
        results.append(f"[OK] DOG_API_KEY is set: {key[:6]}...")
    except ValueError:
        results.append("[X] DOG_API_KEY is not set")
        all_ok = False

    results.append(f"[OK] DOG_API_BASE_URL: {dog_api_base_url()}")
    results.append(f"[OK] DOG_API_TIMEOUT: {dog_api_timeout()}s")
    return all_ok, results


def check_connectivity() -> tuple[bool, list[str]]:
    """Fetch one random image and list favourites."""
    try:
        client = DogImageClient()
    except ValueError as e:
        return False, [f"[!] Skipping connectivity test ({e})"]

    results = []
    try:
        dog = client.fetch_random_image()
        results.append(f"[OK] Random image: {dog.id} {dog.url} ({dog.width}x{dog.height})")
        favorites = client.list_favorites()
        results.append(f"[OK] Favourites listed: {len(favorites)}")
    except DogAPIError as e:
        results.append(f"[X] {type(e).__name__}: {e}")
        return False, results
    return True, results


def main():
    """Run all verification checks."""
    setup_logger("thedog")
    print("Verifying dog image client setup\n")
    print("=" * 60)

    all_checks_passed = True

    print("\n1. Checking .env File...")
    _, msg = check_env_file()
    print(f"   {msg}")

    print("\n2. Checking Environment Variables...")
    ok, msgs = check_env_vars()
    for msg in msgs:
        print(f"   {msg}")
    if not ok:
        all_checks_passed = False

    print("\n3. Testing API Connectivity (Optional)...")
    _, msgs = check_connectivity()
    for msg in msgs:
        print(f"   {msg}")
    # Don't fail overall if connectivity check fails (might be network issue)

    print("\n" + "=" * 60)

    if all_checks_passed:
        print("\n[OK] All critical checks passed!")
        return 0
    print("\n[X] Some checks failed. Set DOG_API_KEY in .env or export it.")
    return 1


if __name__ == "__main__":
    sys.exit(main())
