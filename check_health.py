"""
Smoke check for a running GovInfo API.
Usage:
    python check_health.py [BASE_URL]
Example:
    python check_health.py http://127.0.0.1:9090
"""

import json
import sys

import requests

BASE_URL = sys.argv[1].rstrip("/") if len(sys.argv) > 1 else "http://127.0.0.1:8080"
TIMEOUT = 5

print("=" * 60)
print(f"GOVINFO API SMOKE CHECK ({BASE_URL})")
print("=" * 60)

# Liveness
print("\n[CHECK 1] GET /health")
try:
    response = requests.get(f"{BASE_URL}/health", timeout=TIMEOUT)
except requests.RequestException as e:
    print(f"✗ Request failed: {e}")
    sys.exit(1)

print(f"Status: {response.status_code}")
print(f"Body: {response.text!r}")
if response.status_code != 200 or response.text.strip() != "OK":
    print("✗ Liveness check failed")
    sys.exit(1)
print("✓ Liveness OK")

# Readiness (informational only)
print("\n[CHECK 2] GET /ready")
try:
    response = requests.get(f"{BASE_URL}/ready", timeout=TIMEOUT)
    print(f"Status: {response.status_code}")
    print(f"Response: {json.dumps(response.json(), indent=2)}")
except (requests.RequestException, ValueError) as e:
    print(f"✗ Readiness request failed: {e}")

print("\n" + "=" * 60)
print("CHECK COMPLETE")
print("=" * 60)
