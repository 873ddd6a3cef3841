"""
CLI to run shortest-path scenarios from a YAML file.

Reads scenarios/scenarios.yml, builds each graph or maze, runs Dijkstra or A*,
prints the results and optionally writes one CSV row per scenario.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Tuple
import argparse
import csv
import logging
import os
import time

from adjacency_list_graph import AdjacencyListGraph
from astar_engine import AStarEngine, PathFound
from dijkstra_engine import SimpleDijkstraEngine
from distances import format_distance
from errors import InvalidGraphError, OutOfRangeError
from grid import Cell, Grid
from reporting import format_all_pairs, format_search_result

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = Path(__file__).parent / "scenarios" / "scenarios.yml"

RESULT_FIELDS = ["scenario", "kind", "status", "size", "result", "duration_sec"]


@dataclass(frozen=True)
class GraphScenario:
    name: str
    nodes: int
    edges: Sequence[Tuple[int, int, float]]
    undirected: bool = False
    start: Optional[int] = None


@dataclass(frozen=True)
class MazeScenario:
    name: str
    rows: Sequence[str]
    start: Cell
    goal: Cell


@dataclass(frozen=True)
class ScenarioConfig:
    graphs: Sequence[GraphScenario]
    mazes: Sequence[MazeScenario]


def load_config(path: Path) -> ScenarioConfig:
    import yaml  # type: ignore

    data = yaml.safe_load(path.read_text()) or {}
    graphs = [
        GraphScenario(
            name=g["name"],
            nodes=int(g["nodes"]),
            edges=[(int(e[0]), int(e[1]), e[2]) for e in g.get("edges", [])],
            undirected=bool(g.get("undirected", False)),
            start=int(g["start"]) if g.get("start") is not None else None,
        )
        for g in data.get("graphs", [])
    ]
    mazes = [
        MazeScenario(
            name=m["name"],
            rows=[str(row) for row in m["rows"]],
            start=(int(m["start"][0]), int(m["start"][1])),
            goal=(int(m["goal"][0]), int(m["goal"][1])),
        )
        for m in data.get("mazes", [])
    ]
    return ScenarioConfig(graphs=graphs, mazes=mazes)


def run_scenarios(config_path: Path, results_csv: Path | None = None) -> List[Dict[str, object]]:
    cfg = load_config(config_path)
    start = time.time()
    print(f"[run] queued {len(cfg.graphs)} graph and {len(cfg.mazes)} maze scenarios")

    results: List[Dict[str, object]] = []
    for scenario in cfg.graphs:
        results.append(_timed(run_graph_scenario, scenario))
    for maze in cfg.mazes:
        results.append(_timed(run_maze_scenario, maze))

    if results_csv:
        write_results_csv(results, results_csv)

    elapsed = time.time() - start
    print(f"[run] completed {len(results)} scenarios in {elapsed:.2f}s")
    return results


def _timed(fn, scenario) -> Dict[str, object]:
    start_run = time.time()
    res = fn(scenario)
    res["duration_sec"] = time.time() - start_run
    print(f"[run] completed scenario={res['scenario']} status={res['status']} duration={res['duration_sec']:.3f}s")
    return res


def run_graph_scenario(scenario: GraphScenario) -> Dict[str, object]:
    """
    Single-source costs when the scenario names a start node, all-pairs otherwise.

    Invalid graphs and bad start ids are recorded as errors rather than raised.
    """
    engine = SimpleDijkstraEngine()
    res: Dict[str, object] = {
        "scenario": scenario.name,
        "kind": "graph",
        "size": scenario.nodes,
    }
    try:
        graph = AdjacencyListGraph.from_edges(scenario.nodes, scenario.edges, undirected=scenario.undirected)
        if scenario.start is not None:
            dist = engine.shortest_path_costs(graph, scenario.start)
            res["result"] = " ".join(format_distance(d) for d in dist)
        else:
            matrix = engine.all_pairs_costs(graph)
            print(format_all_pairs(matrix))
            reachable = sum(1 for i, row in enumerate(matrix) for j, d in enumerate(row) if i != j and d is not None)
            res["result"] = f"{reachable} reachable pairs"
    except (InvalidGraphError, OutOfRangeError) as exc:
        logger.warning("scenario %s failed: %s", scenario.name, exc)
        res["status"] = "error"
        res["result"] = str(exc)
        return res

    res["status"] = "ok"
    return res


def run_maze_scenario(scenario: MazeScenario) -> Dict[str, object]:
    """
    Malformed rows are recorded as errors rather than raised.
    """
    try:
        grid = Grid.parse("\n".join(scenario.rows))
    except ValueError as exc:
        logger.warning("scenario %s failed: %s", scenario.name, exc)
        return {
            "scenario": scenario.name,
            "kind": "maze",
            "size": len(scenario.rows),
            "status": "error",
            "result": str(exc),
        }
    result = AStarEngine().search(grid, scenario.start, scenario.goal)
    print(f"{scenario.name}: {format_search_result(result)}")
    return {
        "scenario": scenario.name,
        "kind": "maze",
        "size": grid.size,
        "status": "ok" if isinstance(result, PathFound) else "no_path",
        "result": format_search_result(result),
    }


def write_results_csv(results: Iterable[Dict[str, object]], path: Path) -> None:
    """
    Write per-scenario results to CSV.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=RESULT_FIELDS)
        writer.writeheader()
        for res in results:
            writer.writerow({key: res.get(key, "") for key in RESULT_FIELDS})


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run Dijkstra and A* scenarios from a YAML file.")
    parser.add_argument("--config", type=Path, default=DEFAULT_CONFIG, help="Scenario YAML file")
    parser.add_argument("--results-csv", type=Path, default=None, help="Write per-scenario results here")
    parser.add_argument(
        "--log-level",
        default=os.environ.get("PATHSEARCH_LOG_LEVEL", "WARNING"),
        help="DEBUG, INFO, WARNING or ERROR",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    run_scenarios(args.config, args.results_csv)


if __name__ == "__main__":
    main()
