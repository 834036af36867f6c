import argparse
import sys
from typing import List, Optional

from get_augmenting_path import SEARCH_STRATEGIES
from load_data import load_matching_instance
from ortools_solver import ortools_max_flow
from pengu_survivors import build_matching, matched_pairs


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Match workaholic penguins to procrastinating friends via max flow."
    )
    parser.add_argument("friendships", help="CSV with workaholic,procrastinator columns")
    parser.add_argument("--workaholic-col", default="workaholic")
    parser.add_argument("--procrastinator-col", default="procrastinator")
    parser.add_argument("--strategy", choices=sorted(SEARCH_STRATEGIES), default="dfs",
                        help="augmenting path search")
    parser.add_argument("--check", action="store_true",
                        help="cross-check the flow value with OR-Tools")
    parser.add_argument("--out", help="write the edge flows to this CSV file")
    parser.add_argument("--verbose", action="store_true",
                        help="print every augmentation round")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    try:
        workaholics, procrastinators, friendships = load_matching_instance(
            args.friendships,
            workaholic_col=args.workaholic_col,
            procrastinator_col=args.procrastinator_col,
        )
        G, workaholic_vertices, procrastinator_vertices = build_matching(
            workaholics, procrastinators, friendships, args.strategy, args.verbose
        )
    except (FileNotFoundError, ValueError, IndexError) as e:
        print(f"Error: {e}")
        print("Please check the input data.")
        return 1

    print("solving...")
    value = G.compute_max_flow_value()
    print(f"Maximum matching: {value} ({G.rounds} augmentations)")

    for w, p in matched_pairs(
        workaholics, procrastinators, workaholic_vertices, procrastinator_vertices
    ):
        print(f"{w} -> {p}")

    if args.check:
        expected = ortools_max_flow(G)
        if expected != value:
            print(f"Mismatch: OR-Tools reports {expected}")
            return 1
        print("OR-Tools agrees.")

    if args.out:
        try:
            result_df = G.get_result_df()
        except RuntimeError as e:
            print(f"Error: {e}")
            return 1
        result_df.to_csv(args.out, index=False)
        print(f"Results saved to {args.out}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
