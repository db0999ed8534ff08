# 5. affordability.py

from pandas.api.types import is_numeric_dtype
from sklearn.compose import ColumnTransformer
from sklearn.linear_model import LogisticRegression
from sklearn.metrics import accuracy_score
from sklearn.pipeline import Pipeline
from sklearn.preprocessing import OneHotEncoder

from config import config
from errors import ModelFitError

PREDICTORS = ["room_type", "minimum_nights"]


def add_affordable_label(df):
    """Flag listings priced strictly below the median price (1) or not (0)."""
    df = df.copy()
    median_price = df["price"].median()
    df["affordable"] = (df["price"] < median_price).astype(int)
    return df


def select_predictors(df, predictors=PREDICTORS):
    return df[list(predictors) + ["affordable"]]


def predictor_correlation(df, predictors=PREDICTORS):
    # categorical predictors have no Pearson correlation; only numeric ones are kept
    numeric = df[list(predictors)].select_dtypes(include="number")
    return numeric.corr()


def fit_affordability_classifier(df, predictors=PREDICTORS):
    """
    Fit a logistic regression of the affordability label on room type
    (one-hot) and minimum nights.

    Returns:
        tuple: (fitted Pipeline, in-sample accuracy)
    """
    data = df.dropna(subset=list(predictors) + ["price"])
    if data.empty:
        raise ModelFitError("No rows with complete classifier inputs.")
    if "affordable" not in data.columns:
        data = add_affordable_label(data)
    if data["affordable"].nunique() < 2:
        raise ModelFitError("Affordability label has a single class.")

    categorical = [col for col in predictors if not is_numeric_dtype(data[col])]
    numeric = [col for col in predictors if col not in categorical]
    pre = ColumnTransformer(transformers=[
        ("cat", OneHotEncoder(handle_unknown="ignore"), categorical),
        ("num", "passthrough", numeric),
    ])
    model = Pipeline([
        ("pre", pre),
        ("clf", LogisticRegression(max_iter=1000, random_state=config["SEED"])),
    ])

    X = data[list(predictors)]
    y = data["affordable"]
    model.fit(X, y)
    accuracy = accuracy_score(y, model.predict(X))
    print(f"[INFO] Affordability classifier on {len(data)} listings, accuracy: {accuracy:.3f}")
    return model, accuracy
