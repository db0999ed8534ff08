# 7. app.py

import sys
from pathlib import Path

import matplotlib.pyplot as plt

from affordability import (add_affordable_label, fit_affordability_classifier,
                           predictor_correlation, select_predictors)
from cluster import cluster_listings, cluster_profile
from config import config
from errors import AnalysisError
from load_data import PIPELINE_COLUMNS, coerce_numeric, load_data
from preprocess import clean_listings
from regression import coefficient_table, evaluate_regression, fit_price_regression
from visualize import (plot_availability_hist, plot_clusters, plot_correlation_matrix,
                       plot_price_by_group, plot_price_vs_reviews, plot_room_type_by_group,
                       plot_room_type_counts, plot_room_type_share)

CHARTS = {
    "room_type_counts.png": plot_room_type_counts,
    "room_type_share.png": plot_room_type_share,
    "price_by_group.png": plot_price_by_group,
    "availability_hist.png": plot_availability_hist,
    "price_vs_reviews.png": plot_price_vs_reviews,
    "room_type_by_group.png": plot_room_type_by_group,
}


def _save_path(filename, plot_dir):
    return str(Path(plot_dir) / filename) if plot_dir else None


def _done(fig, plot_dir):
    # saved figures are never shown
    if plot_dir:
        plt.close(fig)


def run(filepath=None, plot_dir=None):
    plot_dir = plot_dir or config["PLOT_DIR"]
    if plot_dir:
        Path(plot_dir).mkdir(parents=True, exist_ok=True)

    raw = coerce_numeric(load_data(filepath, required_columns=PIPELINE_COLUMNS))
    # the affordability section works on the raw listings, read once
    raw_copy = raw.copy()

    df = clean_listings(raw)

    for filename, plot in CHARTS.items():
        _done(plot(df, save_path=_save_path(filename, plot_dir)), plot_dir)

    results = fit_price_regression(df)
    print(results.summary())
    print(coefficient_table(results).to_string())
    print(f"[INFO] In-sample RMSE: {evaluate_regression(results):.2f}")

    clustered, model, score = cluster_listings(df)
    print(cluster_profile(clustered).to_string(index=False))
    _done(plot_clusters(clustered, save_path=_save_path("clusters.png", plot_dir)), plot_dir)

    labelled = add_affordable_label(raw_copy)
    predictors = select_predictors(labelled)
    corr = predictor_correlation(predictors)
    print("[INFO] Predictor correlation matrix:")
    print(corr.to_string())
    fig = plot_correlation_matrix(corr, title="Affordability Predictors",
                                  save_path=_save_path("predictor_correlation.png", plot_dir))
    _done(fig, plot_dir)
    classifier, accuracy = fit_affordability_classifier(labelled)

    if not plot_dir:
        plt.show()

    return {
        "cleaned": df,
        "regression": results,
        "clustered": clustered,
        "labelled": labelled,
        "classifier": classifier,
        "accuracy": accuracy,
    }


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    path = argv[0] if argv else None
    try:
        run(path)
    except AnalysisError as e:
        print(f"[ERROR] {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
