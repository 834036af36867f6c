from typing import List, Tuple

import pandas as pd


def load_matching_instance(
    file_path: str,
    workaholic_col: str = "workaholic",
    procrastinator_col: str = "procrastinator",
) -> Tuple[List, List, List[Tuple[int, int]]]:
    """
    Read friendships from a CSV with one row per (workaholic, procrastinator)
    pair of ids.

    Returns:
        workaholics: sorted unique workaholic ids
        procrastinators: sorted unique procrastinator ids
        friendships: (workaholic index, procrastinator index) pairs
    """
    friendship_df = pd.read_csv(file_path)

    required_columns = [workaholic_col, procrastinator_col]
    if not all(col in friendship_df.columns for col in required_columns):
        raise ValueError(f"CSV must contain columns: {required_columns}")

    # other columns may be sparse
    friendship_df = friendship_df.dropna(subset=required_columns)

    workaholics = sorted(friendship_df[workaholic_col].unique().tolist())
    procrastinators = sorted(friendship_df[procrastinator_col].unique().tolist())

    w_index = {w: i for i, w in enumerate(workaholics)}
    p_index = {p: i for i, p in enumerate(procrastinators)}
    friendships = [
        (w_index[w], p_index[p])
        for w, p in friendship_df[required_columns].itertuples(index=False)
    ]

    return workaholics, procrastinators, friendships
