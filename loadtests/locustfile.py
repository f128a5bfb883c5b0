"""Zen Cafe load testing entry point for Locust.

Discovers all user classes from the scenarios package.

Usage:
    # All scenarios (web UI):
    locust -f loadtests/locustfile.py --host http://localhost:8000

    # Mixed workload only:
    locust -f loadtests/locustfile.py MixedWorkloadUser

    # Headless (CI mode):
    locust -f loadtests/locustfile.py MixedWorkloadUser --headless \
           -u 50 -r 5 -t 300s --csv=results/loadtest

The dev login routes must be mounted, so target a non-production server.
"""

import logging
import time

import requests
from locust import events

# Import all user classes so Locust discovers them
from loadtests.helpers.response import extract_error_detail
from loadtests.scenarios.back_office import BackOfficeUser  # noqa: F401
from loadtests.scenarios.mixed import MixedWorkloadUser  # noqa: F401
from loadtests.scenarios.storefront import ShopperUser  # noqa: F401

logger = logging.getLogger("loadtest")


@events.request.add_listener
def on_request(request_type, name, response, exception, **_kw):
    """Log the API error body for every failed request."""
    if exception:
        logger.error("[EXCEPTION] %s %s: %s", request_type, name, exception)
    elif response is not None and response.status_code >= 400:
        detail = extract_error_detail(response)
        logger.error("[%s] %s %s: %s", response.status_code, request_type, name, detail)


@events.test_start.add_listener
def on_test_start(environment, **_kwargs):
    print(f"\n[LOADTEST] Started at {time.strftime('%H:%M:%S')}")
    print(f"[LOADTEST] Target host: {environment.host}")
    print()


@events.test_stop.add_listener
def on_test_stop(environment, **_kwargs):
    """Print the dashboard figures once the run ends."""
    print(f"\n[LOADTEST] Stopped at {time.strftime('%H:%M:%S')}")
    try:
        token = requests.get(f"{environment.host}/api/login-admin", timeout=5).json()["accessToken"]
        stats = requests.get(
            f"{environment.host}/api/admin/stats",
            headers={"Authorization": f"Bearer {token}"},
            timeout=5,
        ).json()
    except (requests.RequestException, ValueError, KeyError) as e:
        print(f"[LOADTEST] Could not fetch dashboard stats: {e}\n")
        return

    print("\n[LOADTEST] Final dashboard stats:")
    for key, value in stats.items():
        print(f"  {key}: {value}")
    print()
