# 6. visualize.py

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import seaborn as sns

from config import config


def _finish(fig, save_path=None):
    fig.tight_layout()
    if save_path:
        fig.savefig(save_path, dpi=300)
        print(f"[INFO] Plot saved to: {save_path}")
    return fig


def plot_room_type_counts(df, save_path=None):
    fig, ax = plt.subplots(figsize=(8, 6))
    sns.countplot(x="room_type", data=df, ax=ax, order=df["room_type"].value_counts().index)
    ax.set_title("Listings per Room Type")
    ax.set_xlabel("Room Type")
    ax.set_ylabel("Number of Listings")
    return _finish(fig, save_path)


def plot_room_type_share(df, save_path=None):
    counts = df["room_type"].value_counts()
    fig, ax = plt.subplots(figsize=(7, 7))
    ax.pie(counts.values, labels=counts.index, autopct="%1.1f%%", startangle=90)
    ax.set_title("Share of Listings by Room Type")
    ax.axis("equal")
    return _finish(fig, save_path)


def plot_price_by_group(df, save_path=None):
    fig, ax = plt.subplots(figsize=(10, 6))
    sns.boxplot(x="neighbourhood_group", y="price", data=df, ax=ax)
    ax.set_title("Price by Neighbourhood Group")
    ax.set_xlabel("Neighbourhood Group")
    ax.set_ylabel("Price ($)")
    return _finish(fig, save_path)


def availability_bins(availability, width=None):
    """Bin edges of a fixed width covering every availability value."""
    width = width or config["HIST_BIN_WIDTH"]
    values = availability.dropna()
    if values.empty:
        return np.array([0, width])
    start = min(0, np.floor(values.min() / width) * width)
    return np.arange(start, values.max() + width, width)


def plot_availability_hist(df, save_path=None, width=None):
    bins = availability_bins(df["availability_365"], width)
    fig, ax = plt.subplots(figsize=(10, 6))
    ax.hist(df["availability_365"].dropna(), bins=bins, edgecolor="black")
    ax.set_title("Availability Throughout the Year")
    ax.set_xlabel("Days Available (of 365)")
    ax.set_ylabel("Number of Listings")
    return _finish(fig, save_path)


def plot_price_vs_reviews(df, save_path=None):
    fig, ax = plt.subplots(figsize=(10, 6))
    sns.scatterplot(x="number_of_reviews", y="price", hue="neighbourhood_group",
                    data=df, ax=ax, alpha=0.6, s=20)
    ax.set_title("Price vs Number of Reviews")
    ax.set_xlabel("Number of Reviews")
    ax.set_ylabel("Price ($)")
    return _finish(fig, save_path)


def room_type_proportions(df):
    return pd.crosstab(df["neighbourhood_group"], df["room_type"], normalize="index")


def plot_room_type_by_group(df, save_path=None):
    proportions = room_type_proportions(df)
    fig, ax = plt.subplots(figsize=(10, 6))
    proportions.plot(kind="bar", stacked=True, ax=ax, colormap="Set2")
    ax.set_title("Room Type Mix by Neighbourhood Group")
    ax.set_xlabel("Neighbourhood Group")
    ax.set_ylabel("Proportion of Listings")
    ax.legend(title="Room Type")
    return _finish(fig, save_path)


def plot_clusters(clustered, features=None, save_path=None):
    """
    Plot listings on the two clustering features, coloured by cluster.

    Parameters:
        clustered (pd.DataFrame): Rows with a 'cluster' column.
        features (list): The two feature columns. Defaults to config["CLUSTER_FEATURES"].
        save_path (str): Optional path to save the plot.
    """
    x, y = features or config["CLUSTER_FEATURES"]
    fig, ax = plt.subplots(figsize=(8, 6))
    sns.scatterplot(x=x, y=y, hue="cluster", data=clustered, palette="Set2", s=50, ax=ax)
    ax.set_title("Listing Segments (KMeans)")
    ax.set_xlabel(x.replace("_", " ").title())
    ax.set_ylabel(y.replace("_", " ").title())
    return _finish(fig, save_path)


def plot_correlation_matrix(corr, title="Correlation Matrix", save_path=None):
    fig, ax = plt.subplots(figsize=(6, 5))
    sns.heatmap(corr, annot=True, fmt=".2f", cmap="coolwarm", vmin=-1, vmax=1, ax=ax)
    ax.set_title(title)
    return _finish(fig, save_path)
