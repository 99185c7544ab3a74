"""Send a few real events to Amplitude to check an API key end to end.

Usage:
    python scripts/smoke_amplitude.py <api_key> [--endpoint URL]

Tracks a custom event, a page view and a profile update for a throwaway
``test_user_<ms>`` user. Check the Amplitude dashboard afterwards.
"""

import argparse
import asyncio
import sys
import time
from datetime import datetime, timezone

from amplitude_mcp.adapters.ingestion.amplitude import AmplitudeIngestionClient
from amplitude_mcp.core.config import Settings
from amplitude_mcp.core.exceptions import AmplitudeMcpError
from amplitude_mcp.core.logging import LoggerConfigurator
from amplitude_mcp.domains.events.service import AnalyticsService


def green(text: str) -> str:
    return f"\033[32m{text}\033[0m"


def red(text: str) -> str:
    return f"\033[31m{text}\033[0m"


def bold(text: str) -> str:
    return f"\033[1m{text}\033[0m"


async def run_checks(service: AnalyticsService, user_id: str) -> None:
    print(bold("\nTest 1: Tracking a simple event..."))
    response = await service.track_event(
        "test_event",
        user_id=user_id,
        event_properties={
            "test_property": "test_value",
            "timestamp": datetime.now(timezone.utc).isoformat(),
        },
    )
    print(green(f"Success! Response: {response.model_dump()}"))

    print(bold("\nTest 2: Tracking a page view..."))
    response = await service.track_page_view(
        "test_page", user_id=user_id, properties={"referrer": "test_referrer"}
    )
    print(green(f"Success! Response: {response.model_dump()}"))

    print(bold("\nTest 3: Setting user properties..."))
    response = await service.set_user_properties(
        user_id, {"name": "Test User", "email": "test@example.com", "plan": "test_plan"}
    )
    print(green(f"Success! Response: {response.model_dump()}"))


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("api_key", help="Amplitude API key")
    parser.add_argument("--endpoint", default=None, help="Override the ingestion endpoint")
    args = parser.parse_args()

    overrides = {"AMPLITUDE_API_KEY": args.api_key, "DEBUG": True}
    if args.endpoint:
        overrides["AMPLITUDE_ENDPOINT"] = args.endpoint
    settings = Settings(_env_file=None, **overrides)
    LoggerConfigurator.setup(debug=True)

    user_id = f"test_user_{int(time.time() * 1000)}"
    print(f"Test user ID: {user_id}")

    service = AnalyticsService(AmplitudeIngestionClient(settings))
    try:
        asyncio.run(run_checks(service, user_id))
    except AmplitudeMcpError as e:
        print(red(f"\nTest failed: {e.message}"), file=sys.stderr)
        return 1

    print(green("\nAll checks completed successfully!"))
    print("Check your Amplitude dashboard to verify the events have been recorded.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
