from __future__ import annotations

import random
from datetime import datetime, timedelta, timezone

from core.models import Location
from core.services.ledger import SalesLedger
from core.services.sales import DEFAULT_PRODUCTS, build_sale


def wipe_all(ledger: SalesLedger) -> None:
    ledger.clear()


def load_demo_data(ledger: SalesLedger, center: Location, *, count: int = 8, seed: int = 7) -> None:
    """Append `count` catalog sales over the last few days, scattered around `center`."""
    rng = random.Random(seed)
    start = datetime.now(timezone.utc) - timedelta(days=3)

    for i in range(int(count)):
        p = rng.choice(DEFAULT_PRODUCTS)
        ts = start + timedelta(hours=6 * i, minutes=rng.randint(0, 59))
        loc = Location(
            latitude=round(center.latitude + rng.uniform(-0.05, 0.05), 6),
            longitude=round(center.longitude + rng.uniform(-0.05, 0.05), 6),
        )
        ledger.append(
            build_sale(
                product=p.name,
                unit_price=p.price,
                quantity=rng.randint(1, 5),
                location=loc,
                timestamp=ts.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            )
        )
