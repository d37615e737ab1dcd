import argparse

from logzero import logger

from pathfinder.config import SearchConfig, parse_algorithm, parse_heuristic
from pathfinder.constant import CONSTANT
from pathfinder.simulation import Pathfinder
from pathfinder.utils import logging


def parse_args(argv=None):
    ap = argparse.ArgumentParser(description="Run a grid search headless on a saved map.")
    ap.add_argument("map", help=f"map file ({CONSTANT.MAP_FILE.EXTENSION})")
    ap.add_argument("--algorithm", type=parse_algorithm, default=None)
    ap.add_argument("--heuristic", type=parse_heuristic, default=None)
    ap.add_argument("--no-diagonals", action="store_true")
    ap.add_argument("--path-correction", action="store_true")
    ap.add_argument("--report", default=None, help="write the per-step run report to this CSV file")
    return ap.parse_args(argv)


def build_config(args) -> SearchConfig:
    config = SearchConfig.from_env()
    changes = dict()
    if args.algorithm is not None:
        changes["algorithm"] = args.algorithm
    if args.heuristic is not None:
        changes["heuristic"] = args.heuristic
    if args.no_diagonals:
        changes["allow_diagonals"] = False
    if args.path_correction:
        changes["path_correction"] = True
    return config.with_changes(**changes)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.setup_logger(CONSTANT.LOG_DIR)

    pathfinder = Pathfinder(build_config(args))
    pathfinder.load_map(args.map)
    if not pathfinder.start():
        return 2

    while pathfinder.is_running():
        pathfinder.update()

    statistics = pathfinder.export_statistics()
    run = statistics["RUN"]
    logger.info(
        f"Settled nodes: {run['SETTLED']}, unsettled nodes: {run['UNSETTLED']}, total steps: {run['STEPS']}"
    )
    if pathfinder.has_found_path():
        path = pathfinder.reconstruct_path()
        logger.info(f"Path length: {len(path)}, cost: {path.cost:.2f}")
    else:
        logger.info("No path found!")

    if args.report:
        pathfinder.export_run_report(args.report)
    return 0 if pathfinder.has_found_path() else 1


if __name__ == "__main__":
    raise SystemExit(main())
