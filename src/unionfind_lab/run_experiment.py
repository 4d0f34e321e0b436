import argparse
import os
import pandas as pd
from tqdm import tqdm
from unionfind_lab.data.workload import Workload
from unionfind_lab.strategies import STRATEGIES, get_strategy

def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Compare union-find merge strategies")
    parser.add_argument('--workload', type=str, default='random', choices=['random', 'chain', 'csv'])
    parser.add_argument('--csv', type=str, default=None)
    parser.add_argument('--n', type=int, default=1000)
    parser.add_argument('--num-unions', type=int, default=None)
    parser.add_argument('--trials', type=int, default=5)
    parser.add_argument('--seed', type=int, default=0)
    parser.add_argument('--strategies', type=str, nargs='+', default=list(STRATEGIES),
                        choices=list(STRATEGIES))
    parser.add_argument('--checkpoint-every', type=int, default=100)
    parser.add_argument('--output-dir', type=str, default='experiment')
    return parser.parse_args(argv)

def build_workload(args, trial):
    """Workload for one trial, seeded by the trial number when random"""
    if args.workload == 'csv':
        if args.csv is None:
            raise ValueError("--csv is required for the csv workload")
        return Workload.from_csv(args.csv)
    if args.workload == 'chain':
        return Workload.chain(args.n)
    num_unions = args.n if args.num_unions is None else args.num_unions
    return Workload.random(args.n, num_unions, seed=args.seed + trial)

def run_experiments(args):
    """Run every requested strategy and summarize the final tree shapes"""
    rows = []
    # only the random workload differs between trials
    fixed = None if args.workload == "random" else build_workload(args, 0)
    for name in args.strategies:
        print(f"Running {name}")
        strategy = get_strategy(name, checkpoint_every=args.checkpoint_every)
        for i in tqdm(range(1, args.trials + 1)):
            workload = fixed if fixed is not None else build_workload(args, i)
            output_path = os.path.join(args.output_dir, workload.name, name, f"{i}.json")
            results = strategy.run(workload, output_path)
            rows.append({"strategy": name, "trial": i, **results[-1]})

    if not rows:
        return pd.DataFrame()

    summary = pd.DataFrame(rows).drop(columns="trial").groupby("strategy").mean()
    print(summary.to_string())
    return summary

def main(argv=None):
    args = parse_args(argv)
    run_experiments(args)

if __name__ == '__main__':
    main()
