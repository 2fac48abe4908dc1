import os
import sys
import json
import requests

BASE_URL = os.environ.get("SMOKE_URL") or os.environ.get("DEV_URL", "http://127.0.0.1:5002")
API = f"{BASE_URL.rstrip('/')}/api"
ARTEFACT_ID = os.environ.get("SMOKE_ARTEFACT_ID")

SAMPLE_CSV = (
    "Date,Case name,Hearing length,Hearing type,Venue,Additional information\n"
    "02/01/2025,A Vs B,1 hour,Substantive hearing,Remote - Teams,Listed for 10am\n"
)


def get(path: str, **params):
    r = requests.get(f"{API}{path}", params=params, timeout=10)
    r.raise_for_status()
    return r


def main():
    print(f"[smoke] Target: {API}")
    print("[smoke] /health:", get("/health").status_code)
    print("[smoke] /version:", get("/version").status_code)
    print("[smoke] /list-types:", get("/list-types").status_code)

    r = requests.post(
        f"{API}/lists/CARE_STANDARDS_TRIBUNAL_WEEKLY_HEARING_LIST/convert",
        files={"file": ("sample.csv", SAMPLE_CSV.encode("utf-8"), "text/csv")},
        timeout=20,
    )
    r.raise_for_status()
    print("[smoke] /convert:", r.status_code, json.dumps(r.json(), indent=2)[:300])

    if ARTEFACT_ID:
        r = get(f"/artefacts/{ARTEFACT_ID}/cases/public", page=1)
        print("[smoke] /cases/public:", r.status_code, r.json().get("totalCases"))


if __name__ == "__main__":
    try:
        main()
    except Exception as e:
        print("[smoke] FAILED:", e)
        sys.exit(1)
