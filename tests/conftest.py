import matplotlib

matplotlib.use("Agg")

import numpy as np
import pandas as pd
import pytest
import matplotlib.pyplot as plt


COLUMNS = [
    "id", "name", "host_name", "neighbourhood_group", "room_type", "price",
    "minimum_nights", "number_of_reviews", "last_review", "reviews_per_month",
    "availability_365",
]


@pytest.fixture()
def raw_listings():
    """
    Ten literal listings across two neighbourhood groups:
    - id 3 has no reviews_per_month (Brooklyn median of 1.0, 2.0, 4.0 is 2.0)
    - id 7 has no host_name
    - the second id 5 row duplicates the first one
    - id 10 has an outlier price
    """
    rows = [
        (1, "Cozy loft", "Ana", "Brooklyn", "Private room", 100, 2, 10, "2019-05-21", 1.0, 120),
        (2, "Sunny room", "Ben", "Brooklyn", "Private room", 110, 1, 25, "2019-06-01", 2.0, 300),
        (3, "Quiet studio", "Cy", "Brooklyn", "Entire home/apt", 120, 3, 0, "", np.nan, 0),
        (4, "Garden flat", "Dee", "Brooklyn", "Entire home/apt", 90, 2, 40, "not a date", 4.0, 45),
        (5, "Midtown suite", "Eve", "Manhattan", "Entire home/apt", 150, 1, 8, "2019-07-04", 0.5, 200),
        (6, "Park view", "Fay", "Manhattan", "Private room", 140, 5, 60, "2019-01-15", 1.5, 365),
        (7, "No host", None, "Manhattan", "Shared room", 130, 1, 12, "2019-02-02", 3.0, 90),
        (5, "Midtown suite", "Eve", "Manhattan", "Entire home/apt", 150, 1, 8, "2019-07-04", 0.5, 200),
        (9, "Loft", "Gus", "Manhattan", "Entire home/apt", 160, 30, 3, "2019-03-03", 2.5, 180),
        (10, "Penthouse", "Hal", "Manhattan", "Entire home/apt", 5000, 2, 1, "2019-04-04", 1.0, 10),
    ]
    return pd.DataFrame(rows, columns=COLUMNS)


@pytest.fixture()
def regression_listings():
    """Thirty-six listings with price linear in the regression inputs plus small noise."""
    rng = np.random.default_rng(0)
    n = 36
    room_types = ["Entire home/apt", "Private room", "Shared room"]
    groups = ["Brooklyn", "Manhattan"]
    df = pd.DataFrame({
        "room_type": [room_types[i % 3] for i in range(n)],
        "neighbourhood_group": [groups[(i // 3) % 2] for i in range(n)],
        "reviews_per_month": rng.uniform(0, 5, n),
        "availability_365": rng.integers(0, 366, n),
    })
    df["price"] = (
        60
        + 80 * (df["room_type"] == "Entire home/apt")
        + 25 * (df["neighbourhood_group"] == "Manhattan")
        + 3 * df["reviews_per_month"]
        + 0.1 * df["availability_365"]
        + rng.normal(0, 5, n)
    )
    return df


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")
