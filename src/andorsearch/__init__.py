"""AND-OR search for conditional plans in nondeterministic environments."""

from andorsearch.executor import PlanExecutionError, PlanExecutor
from andorsearch.metrics import Metrics
from andorsearch.path import Path
from andorsearch.plan import ActionStep, BranchStep, BranchTable, Plan
from andorsearch.problem import FunctionProblem, NondeterministicProblem
from andorsearch.search import AndOrSearch
from andorsearch.table import ProblemTable, ProblemTableError, TableProblem, load_problem

__all__ = [
    "ActionStep",
    "AndOrSearch",
    "BranchStep",
    "BranchTable",
    "FunctionProblem",
    "Metrics",
    "NondeterministicProblem",
    "Path",
    "Plan",
    "PlanExecutionError",
    "PlanExecutor",
    "ProblemTable",
    "ProblemTableError",
    "TableProblem",
    "load_problem",
]
