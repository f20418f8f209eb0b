# curtailment/cli/demo.py   (external demo script)

import logging
from datetime import datetime, timedelta, timezone

import matplotlib.pyplot as plt

from curtailment import CurtailmentCategory, TenantStores, plot_level_history, providers


def main() -> None:
    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    tenants = TenantStores(providers.get("vestas"))
    store = tenants.store_for("windpark-north")

    now = datetime.now(timezone.utc)
    store.set_custom_level(CurtailmentCategory.NOISE, 0.6, now - timedelta(hours=6))
    store.set_custom_level(CurtailmentCategory.NOISE, 0.4, now - timedelta(hours=2))
    # operator backfills a correction that started ten minutes ago
    store.set_custom_level(CurtailmentCategory.NOISE, 0.0, now - timedelta(minutes=10))

    for category in CurtailmentCategory:
        print(f"{category!s:>12}: {store.get_current_level(category):.2f}")

    print(store.history())
    print(
        "Noise 3h ago:",
        store.get_level(CurtailmentCategory.NOISE, now - timedelta(hours=3)),
    )

    plot_level_history(
        store, CurtailmentCategory.NOISE, now - timedelta(hours=8), now + timedelta(hours=1)
    )
    plt.show()


if __name__ == "__main__":
    main()
