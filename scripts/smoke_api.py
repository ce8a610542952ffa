import os
import subprocess
import sys
import time

import requests

BASE_URL = "http://127.0.0.1:8000"


def smoke_api():
    print("Starting API server...")
    # Start the API server in the background
    process = subprocess.Popen(
        [sys.executable, "api_gateway/main.py"],
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
        env={**os.environ, "ADMIN_USER_IDS": "u-admin"},
    )

    try:
        print("Waiting for server to start...")
        time.sleep(5)

        response = requests.get(f"{BASE_URL}/bits", params={"user_id": "u-amy", "sort": "votes"})
        print(f"Status Code: {response.status_code}")
        bits = response.json()
        for bit in bits:
            print(f"  {bit['name']} rating={bit['rating']:.1f} votes={bit['votes']} owner={bit['owner']}")

        if bits:
            target = bits[-1]["id"]
            response = requests.post(f"{BASE_URL}/bits/{target}/ratings", json={"user_id": "u-amy", "score": 5})
            print(f"Rate -> {response.status_code}: {response.json()}")

        response = requests.get(f"{BASE_URL}/owners/top")
        print("\n--- Top Bitters ---")
        for entry in response.json()["top_by_count"]:
            print(f"  {entry['name']} bits={entry['count']} avg={entry['avg']}")

    except Exception as e:
        print(f"Smoke test failed: {e}")
    finally:
        print("\nStopping API server...")
        process.terminate()
        process.wait()


if __name__ == "__main__":
    smoke_api()
