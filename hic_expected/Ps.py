import numpy as np
import pandas as pd
import plotly.express as px

"""
# example of how to use the functions
func = calc.get_expected_value_function()
df = expected_to_df(func)
fig = plot_expected_curve(df)
"""
# Expected curve related functions
def expected_to_df(func, chr_idx=None):
    """
    Tabulate an expected curve.
    Input:
        func: ExpectedValueFunction
        chr_idx: if not None, scale the curve with this chromosome's factor
    Output:
        dataframe with columns dist, s_bp, expected
    """
    if chr_idx is None:
        values = func.get_expected_values_no_normalization()
    else:
        values = func.get_expected_values_with_normalization(chr_idx)
    dist = np.arange(len(values), dtype=np.int64)
    return pd.DataFrame(
        {
            "dist" : dist,
            # adding real distance in bp
            "s_bp" : dist * func.get_bin_size(),
            "expected" : values
        }
    )
def plot_expected_curve(df, col="expected"):
    """
    Plot expected curve in log-log space.
    Input:
        df: output of expected_to_df
        col: column name of expected values
    Output:
        fig: plotly figure
    """
    # dist 0 can't go on a log axis
    df = df.loc[df["s_bp"] > 0]
    fig = px.scatter(
        df,
        x = "s_bp",
        y = col,
        log_x=True,
        log_y=True,
    )
    fig.update_traces(
        mode = "markers",
        marker_color = "blue",
        marker_size = 1,
        marker_opacity = 1,
    )
    fig.update_layout(
        xaxis_title = "Distances(bp)",
        yaxis_title = "Expected contacts",
        height = 500,
        width = 600,
        title = "Expected curve",
        plot_bgcolor = "rgba(0,0,0,0)",
    )
    return fig
