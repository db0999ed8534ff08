# 0. config.py

"""
Central settings for the listings analysis. Every step reads its defaults
from here; pass explicit arguments to override a single call.
"""

config = {
    # --- Data ---
    "DATA_PATH": "AB_NYC_2019.csv",
    "PLOT_DIR": None,  # None shows charts instead of saving them
    "SEED": 42,

    # --- Cleaning ---
    "IQR_MULTIPLIER": 1.5,

    # --- Charts ---
    "HIST_BIN_WIDTH": 30,

    # --- Modeling ---
    "N_CLUSTERS": 3,
    "CLUSTER_FEATURES": ["number_of_reviews", "price"],
    "SILHOUETTE_SAMPLE": 10000,
    "ALPHA": 0.05,
}
