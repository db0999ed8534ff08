# 3. regression.py

import numpy as np
import pandas as pd
import statsmodels.formula.api as smf
from sklearn.metrics import mean_squared_error

from config import config
from errors import ModelFitError

PRICE_FORMULA = "price ~ C(room_type) + C(neighbourhood_group) + reviews_per_month + availability_365"
CATEGORICAL_PREDICTORS = ["room_type", "neighbourhood_group"]
NUMERIC_PREDICTORS = ["reviews_per_month", "availability_365"]


def model_rows(df):
    """Rows with every regression input present; the rest are left out silently."""
    return df.dropna(subset=["price"] + CATEGORICAL_PREDICTORS + NUMERIC_PREDICTORS)


def fit_price_regression(df, formula=PRICE_FORMULA):
    """
    Fit an ordinary least squares model of price on room type, neighbourhood
    group, reviews per month and availability. Categorical predictors are
    dummy-encoded against their first level.

    Parameters:
        df (pd.DataFrame): Cleaned listings table.
        formula (str): Patsy formula of the model.

    Returns:
        RegressionResultsWrapper: statsmodels results (params, bse, pvalues, summary()).

    Raises:
        ModelFitError: No usable rows, a constant numeric predictor, or not
            enough rows to estimate every coefficient.
    """
    data = model_rows(df)
    if data.empty:
        raise ModelFitError("No rows with complete regression inputs.")

    constant = [col for col in NUMERIC_PREDICTORS if data[col].nunique() < 2]
    if constant:
        raise ModelFitError(f"Zero-variance predictors: {constant}")

    results = smf.ols(formula, data=data).fit()

    exog = results.model.exog
    if results.df_resid < 1 or np.linalg.matrix_rank(exog) < exog.shape[1]:
        raise ModelFitError(
            f"Cannot estimate {exog.shape[1]} coefficients from {len(data)} rows."
        )

    print(f"[INFO] Fitted price regression on {int(results.nobs)} listings, R^2: {results.rsquared:.3f}")
    return results


def coefficient_table(results, alpha=None):
    alpha = config["ALPHA"] if alpha is None else alpha
    table = pd.DataFrame({
        "coef": results.params,
        "std_err": results.bse,
        "t": results.tvalues,
        "p_value": results.pvalues,
    })
    table["significant"] = table["p_value"] < alpha
    return table


def rmse(actual, predicted):
    return float(np.sqrt(mean_squared_error(actual, predicted)))


def evaluate_regression(results):
    # in-sample: the same rows the model was fitted on
    return rmse(results.model.endog, results.fittedvalues)
