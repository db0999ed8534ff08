# 1. load_data.py

import pandas as pd

from config import config
from errors import LoadError, ParseError

EXPECTED_COLUMNS = (
    "id", "name", "host_id", "host_name", "neighbourhood_group", "neighbourhood",
    "latitude", "longitude", "room_type", "price", "minimum_nights",
    "number_of_reviews", "last_review", "reviews_per_month",
    "calculated_host_listings_count", "availability_365",
)

# columns the cleaning, charts and models read
PIPELINE_COLUMNS = (
    "name", "host_name", "neighbourhood_group", "room_type", "price",
    "minimum_nights", "number_of_reviews", "last_review", "reviews_per_month",
    "availability_365",
)

NUMERIC_COLUMNS = (
    "price", "minimum_nights", "number_of_reviews", "reviews_per_month",
    "calculated_host_listings_count", "availability_365",
)


def load_data(filepath=None, required_columns=None):
    """
    Read the listings CSV into a DataFrame.

    Parameters:
        filepath (str or Path): CSV to read. Defaults to config["DATA_PATH"].
        required_columns (iterable): Columns that must be present. Nothing is
            checked when None.

    Returns:
        pd.DataFrame: The raw listings table.

    Raises:
        LoadError: The file is missing or unreadable.
        ParseError: The file is not valid CSV or lacks a required column.
    """
    filepath = filepath or config["DATA_PATH"]
    try:
        df = pd.read_csv(filepath)
    except FileNotFoundError:
        raise LoadError(f"File not found: {filepath}. Please check the path.")
    except (IsADirectoryError, PermissionError) as e:
        raise LoadError(f"Cannot read {filepath}: {e}")
    except pd.errors.EmptyDataError:
        raise ParseError(f"{filepath} is empty.")
    except (pd.errors.ParserError, UnicodeDecodeError) as e:
        raise ParseError(f"Malformed CSV in {filepath}: {e}")

    if required_columns is not None:
        missing = [col for col in required_columns if col not in df.columns]
        if missing:
            raise ParseError(f"Missing required columns: {missing}")

    print(f"[INFO] Loaded data with shape: {df.shape}")
    return df


def coerce_numeric(df, columns=NUMERIC_COLUMNS):
    # stray text cells become NaN and are excluded downstream
    df = df.copy()
    for col in columns:
        if col in df.columns:
            df[col] = pd.to_numeric(df[col], errors="coerce")
    return df
