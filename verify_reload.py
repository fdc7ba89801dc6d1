"""
Reload check against a running server.

Starts the API twice on the same database file. Each start drops, creates
and seeds the schema; the row counts and the sample reports must be the
same after both starts.
"""

import time
import subprocess
import httpx
import sys
import os
import signal
import tempfile

BASE_URL = "http://127.0.0.1:8000"
API_PREFIX = "/v1"
SAMPLE_CONSIGNMENT = 1001

SERVER_CMD = [
    sys.executable, "-m", "uvicorn", "shipment_tracker.app.main:app",
    "--host", "127.0.0.1", "--port", "8000",
]


def wait_for_server(retries=10, delay=2):
    url = f"{BASE_URL}/health"
    print(f"Waiting for server at {url}...")
    for i in range(retries):
        try:
            resp = httpx.get(url)
            if resp.status_code == 200:
                print("✅ Server is up!")
                return True
        except httpx.ConnectError:
            pass
        time.sleep(delay)
    print("❌ Server failed to start.")
    return False


def snapshot():
    """Collect the reports that must not change between loads."""
    counts = httpx.get(f"{BASE_URL}{API_PREFIX}/reports/row-counts").json()
    items = httpx.get(f"{BASE_URL}{API_PREFIX}/consignments/{SAMPLE_CONSIGNMENT}/items").json()
    tracking = httpx.get(f"{BASE_URL}{API_PREFIX}/consignments/{SAMPLE_CONSIGNMENT}/tracking").json()
    return {
        "counts": {row["table_name"]: row["row_count"] for row in counts},
        "items": [row["item_name"] for row in items],
        "tracking": [row["tracking_status"] for row in tracking],
    }


def start_and_snapshot(step):
    print(f"\n--- [{step}] Starting Server ---")
    # Server output goes to a file, never an unread pipe
    with tempfile.TemporaryFile() as server_log:
        proc = subprocess.Popen(
            SERVER_CMD,
            stdout=server_log,
            stderr=subprocess.STDOUT,
            env={**os.environ, "LOAD_ON_STARTUP": "True", "DROP_EXISTING": "True"},
        )
        try:
            if not wait_for_server():
                server_log.seek(0)
                print("Server Output:", server_log.read().decode())
                raise Exception("Server start failed")
            data = snapshot()
            print(data)
            return data
        finally:
            print(f"--- [{step}] Stopping Server ---")
            proc.send_signal(signal.SIGTERM)
            proc.wait()


def run_verification():
    first = start_and_snapshot("Load 1")
    time.sleep(2)  # Wait for port release
    second = start_and_snapshot("Load 2")

    if first != second:
        print(f"❌ Reload changed the data:\n  {first}\n  {second}")
        sys.exit(1)
    if first["counts"] != {"Courier": 5, "Consignment": 10, "Item": 15, "TrackingEvents": 22}:
        print(f"❌ Unexpected row counts: {first['counts']}")
        sys.exit(1)
    print("✅ Reload is idempotent")


if __name__ == "__main__":
    run_verification()
