# 2. preprocess.py

import pandas as pd

from config import config


def group_medians(df, column="reviews_per_month", group="neighbourhood_group"):
    # NaN values are skipped by median(); a group with no values maps to NaN
    return df.groupby(group)[column].median()


def impute_reviews_per_month(df, group="neighbourhood_group"):
    df = df.copy()
    medians = group_medians(df, "reviews_per_month", group)
    df["reviews_per_month"] = df["reviews_per_month"].fillna(df[group].map(medians))
    return df


def drop_incomplete(df):
    return df.dropna(subset=["name", "host_name"])


def drop_duplicate_rows(df):
    return df.drop_duplicates(keep="first")


def price_bounds(prices, multiplier=None):
    """Return the (lower, upper) IQR fence for a price series."""
    multiplier = config["IQR_MULTIPLIER"] if multiplier is None else multiplier
    Q1 = prices.quantile(0.25)
    Q3 = prices.quantile(0.75)
    IQR = Q3 - Q1
    return Q1 - multiplier * IQR, Q3 + multiplier * IQR


def filter_price_outliers(df, multiplier=None):
    lower, upper = price_bounds(df["price"], multiplier)
    return df[df["price"].between(lower, upper, inclusive="both")]


def parse_last_review(df):
    df = df.copy()
    df["last_review"] = pd.to_datetime(df["last_review"], errors="coerce")
    return df


def clean_listings(df, verbose=True):
    """
    Run the cleaning steps in order: impute, drop incomplete rows,
    deduplicate, filter price outliers, parse review dates.

    Imputation happens first so that imputed rows take part in the
    quartile computation of the outlier filter.

    Parameters:
        df (pd.DataFrame): Raw listings table. It is not modified.
        verbose (bool): Print a per-step report of removed rows.

    Returns:
        pd.DataFrame: The cleaned listings table.
    """
    report = []
    before_rows = len(df)

    df = impute_reviews_per_month(df)
    still_missing = int(df["reviews_per_month"].isna().sum())

    n = len(df)
    df = drop_incomplete(df)
    report.append(("rows missing name/host_name removed", n - len(df)))

    n = len(df)
    df = drop_duplicate_rows(df)
    report.append(("exact duplicate rows removed", n - len(df)))

    n = len(df)
    df = filter_price_outliers(df)
    report.append(("price outliers removed", n - len(df)))

    df = parse_last_review(df)

    if verbose:
        print("[INFO] Cleaning report:")
        print(f"  rows before: {before_rows}")
        for label, count in report:
            print(f"  {label}: {count}")
        if still_missing:
            print(f"  reviews_per_month left null (no group median): {still_missing}")
        print(f"  rows after cleaning: {len(df)}")

    return df
