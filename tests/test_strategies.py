"""
Tests for the six search strategies.
"""

import pytest

from src.solver import (
    BoardState,
    Move,
    PieceKind,
    SolutionContext,
    SolveStatus,
    SolverParameterError,
    create_strategy,
    legal_moves,
)

DETERMINISTIC = [
    ("bfs", {}),
    ("dfs", {"max_depth": 200}),
    ("backtracking", {"max_depth": 30}),
    ("backtracking", {"max_depth": 30, "visited_scope": "global"}),
    ("astar", {}),
    ("astar", {"heuristic": "manhattan_nearest"}),
]

ALL_STRATEGIES = DETERMINISTIC + [
    ("trial_error", {"max_attempts": 20, "seed": 1}),
    ("trial_error_depth", {"max_attempts": 20, "depth_bound": 10, "seed": 1}),
]


def run(name, start, target, **params):
    if isinstance(start, str):
        start = BoardState.from_string(start)
    if isinstance(target, str):
        target = BoardState.from_string(target)
    strategy = create_strategy(name, **params)
    return strategy.solve(SolutionContext(start=start, target=target))


def count_reachable(start):
    seen = {start}
    frontier = [start]
    while frontier:
        board = frontier.pop()
        for move in legal_moves(board):
            nxt = board.apply_move(move)
            if nxt not in seen:
                seen.add(nxt)
                frontier.append(nxt)
    return len(seen)


def assert_valid_solution(solution, start, target):
    assert solution.found
    assert solution.status is SolveStatus.SOLVED
    boards = start.replay(solution.moves)
    assert boards[-1] == target
    assert solution.board_states == boards
    assert solution.final_board == target


@pytest.fixture
def bfs_solution(reference_start, reference_target):
    return run("bfs", reference_start, reference_target)


class TestBreadthFirst:
    def test_solves_reference_puzzle(self, bfs_solution, reference_start, reference_target):
        assert_valid_solution(bfs_solution, reference_start, reference_target)
        # The king alone needs two steps to reach the far corner
        assert bfs_solution.move_count >= 2
        assert bfs_solution.metrics.strategy_name == "bfs"
        assert bfs_solution.metrics.states_explored > 0

    def test_no_shorter_solution_exists(self, bfs_solution, reference_start, reference_target):
        shorter = bfs_solution.move_count - 1
        assert not run("backtracking", reference_start, reference_target, max_depth=shorter).found
        assert not run("dfs", reference_start, reference_target, max_depth=shorter).found

    def test_no_strategy_beats_bfs(self, bfs_solution, reference_start, reference_target):
        for name, params in ALL_STRATEGIES:
            solution = run(name, reference_start, reference_target, **params)
            if solution.found:
                assert_valid_solution(solution, reference_start, reference_target)
                assert solution.move_count >= bfs_solution.move_count, name

    def test_single_move(self):
        solution = run("bfs", "R..", "..R")
        assert solution.moves == [Move.create((0, 0), (0, 2), PieceKind.ROOK)]


class TestDepthFirst:
    def test_finds_solution_with_generous_bound(self, reference_start, reference_target):
        solution = run("dfs", reference_start, reference_target, max_depth=200)
        assert_valid_solution(solution, reference_start, reference_target)

    def test_respects_depth_bound(self, bfs_solution, reference_start, reference_target):
        for bound in range(1, bfs_solution.move_count + 6):
            solution = run("dfs", reference_start, reference_target, max_depth=bound)
            if solution.found:
                assert solution.move_count <= bound
                assert_valid_solution(solution, reference_start, reference_target)
            else:
                assert solution.status is SolveStatus.NOT_FOUND
                assert solution.moves == []

    def test_goal_checked_at_bound(self):
        solution = run("dfs", "R..", "..R", max_depth=1)
        assert solution.move_count == 1

    def test_marks_boards_visited_when_pushed(self):
        # The direct move is pushed before the detour through the middle
        # cell is expanded, so the detour cannot reach the goal again.
        solution = run("dfs", "R..", "..R", max_depth=5)
        assert solution.moves == [Move.create((0, 0), (0, 2), PieceKind.ROOK)]


class TestBacktracking:
    def test_path_scope_is_complete_within_bound(self, bfs_solution, reference_start, reference_target):
        solution = run("backtracking", reference_start, reference_target,
                       max_depth=bfs_solution.move_count)
        assert_valid_solution(solution, reference_start, reference_target)
        assert solution.move_count == bfs_solution.move_count

    def test_follows_generator_order(self):
        # First generated move slides one cell, so the path takes two moves
        solution = run("backtracking", "R..", "..R", max_depth=5)
        assert solution.moves == [
            Move.create((0, 0), (0, 1), PieceKind.ROOK),
            Move.create((0, 1), (0, 2), PieceKind.ROOK),
        ]
        # Start board plus the board after the first slide
        assert solution.metrics.max_frontier == 2

    def test_respects_depth_bound(self):
        assert run("backtracking", "R..", "..R", max_depth=1).move_count == 1

    def test_large_bound_exhausts_without_error(self):
        # Bishop on the wrong square colour; the search walks every
        # reachable board along paths that can outgrow the recursion limit
        start = BoardState.from_string("KRB./..../..../....")
        solution = run("backtracking", start, "KR.B/..../..../....",
                       max_depth=5000, visited_scope="global")
        assert solution.status is SolveStatus.NOT_FOUND
        assert solution.moves == []
        assert solution.metrics.states_explored == count_reachable(start)

    @pytest.mark.parametrize("scope", ["path", "global"])
    def test_large_bound_small_board(self, scope):
        solution = run("backtracking", "KRB/...", "KR./..B",
                       max_depth=5000, visited_scope=scope)
        assert solution.status is SolveStatus.NOT_FOUND

    @pytest.mark.parametrize("scope", ["path", "global"])
    def test_result_never_exceeds_bound(self, scope, bfs_solution, reference_start, reference_target):
        for bound in range(1, bfs_solution.move_count + 4):
            solution = run("backtracking", reference_start, reference_target,
                           max_depth=bound, visited_scope=scope)
            if solution.found:
                assert solution.move_count <= bound
                assert_valid_solution(solution, reference_start, reference_target)
            else:
                assert solution.moves == []

    def test_invalid_scope(self):
        with pytest.raises(SolverParameterError):
            create_strategy("backtracking", visited_scope="tree")


class TestTrialError:
    def test_solves_easy_puzzle(self):
        solution = run("trial_error", "R..", "..R", max_attempts=5, seed=0)
        assert_valid_solution(solution, BoardState.from_string("R.."), BoardState.from_string("..R"))
        assert solution.move_count <= 20
        assert 1 <= solution.metrics.attempts <= 5

    def test_depth_bound_limits_walk(self):
        solution = run("trial_error_depth", "R..", "..R", max_attempts=50, depth_bound=1, seed=0)
        assert solution.moves == [Move.create((0, 0), (0, 2), PieceKind.ROOK)]

    @pytest.mark.parametrize("name,params", [
        ("trial_error", {}),
        ("trial_error_depth", {"depth_bound": 7}),
    ])
    def test_seed_reproducible(self, name, params, reference_start, reference_target):
        first = run(name, reference_start, reference_target, max_attempts=30, seed=42, **params)
        second = run(name, reference_start, reference_target, max_attempts=30, seed=42, **params)
        assert first.status is second.status
        assert first.moves == second.moves

    def test_same_instance_reproducible(self, reference_start, reference_target):
        strategy = create_strategy("trial_error", max_attempts=10, seed=5)
        context = SolutionContext(start=reference_start, target=reference_target)
        assert strategy.solve(context).moves == strategy.solve(context).moves

    def test_exhausted_budget_is_not_found(self):
        # A bishop never changes square colour
        progress = []
        strategy = create_strategy("trial_error", max_attempts=3, seed=1)
        context = SolutionContext(
            start=BoardState.from_string("B./.."),
            target=BoardState.from_string(".B/.."),
            progress_callback=lambda pct, msg: progress.append(pct)
        )
        solution = strategy.solve(context)
        assert solution.status is SolveStatus.NOT_FOUND
        assert solution.moves == []
        assert solution.metrics.attempts == 3
        assert progress == pytest.approx([1 / 3, 2 / 3, 1.0])

    def test_marked_non_deterministic(self):
        assert not create_strategy("trial_error").deterministic
        assert create_strategy("bfs").deterministic


class TestAStar:
    def test_solves_reference_puzzle(self, reference_start, reference_target):
        solution = run("astar", reference_start, reference_target)
        assert_valid_solution(solution, reference_start, reference_target)

    def test_prefers_lower_estimate(self):
        solution = run("astar", "R..", "..R")
        assert solution.move_count == 1
        # The goal is queued after the one-step slide but has lower f
        assert solution.metrics.states_explored == 1

    def test_equal_estimates_expand_in_insertion_order(self):
        # Both first moves leave the rook one step from the corner (f = 2);
        # the rightward slide is generated first, so its branch wins
        solution = run("astar", "R./..", "../.R")
        assert solution.moves == [
            Move.create((0, 0), (0, 1), PieceKind.ROOK),
            Move.create((0, 1), (1, 1), PieceKind.ROOK),
        ]
        assert solution.metrics.states_explored == 3

    def test_closed_boards_expanded_once(self, reachable_boards, reference_start):
        # Both bishops on one square colour cannot be reached from the start
        solution = run("astar", reference_start, "B.B/RRK")
        assert solution.status is SolveStatus.NOT_FOUND
        assert solution.metrics.states_explored == len(reachable_boards)
        assert solution.metrics.states_generated > solution.metrics.states_explored

    def test_nearest_heuristic(self, bfs_solution, reference_start, reference_target):
        solution = run("astar", reference_start, reference_target, heuristic="manhattan_nearest")
        assert_valid_solution(solution, reference_start, reference_target)
        assert solution.move_count >= bfs_solution.move_count

    def test_unknown_heuristic(self):
        with pytest.raises(ValueError):
            create_strategy("astar", heuristic="euclid")


class TestSharedContracts:
    @pytest.mark.parametrize("name,params", ALL_STRATEGIES)
    def test_start_equals_target(self, name, params, reference_start):
        solution = run(name, reference_start, BoardState.from_string("KBB/RR."), **params)
        assert solution.found
        assert solution.moves == []
        assert solution.board_states == [reference_start]

    @pytest.mark.parametrize("name,params", ALL_STRATEGIES)
    def test_different_pieces_are_infeasible(self, name, params, reference_start):
        solution = run(name, reference_start, BoardState.from_string("RBB/RR."), **params)
        assert not solution.found
        assert solution.status is SolveStatus.INFEASIBLE
        assert solution.is_infeasible
        assert solution.moves == []
        assert solution.metrics.states_explored == 0

    @pytest.mark.parametrize("name,params", DETERMINISTIC)
    def test_unreachable_target_not_found(self, name, params):
        solution = run(name, "B./..", ".B/..", **params)
        assert solution.status is SolveStatus.NOT_FOUND
        assert solution.moves == []

    @pytest.mark.parametrize("name,params", DETERMINISTIC)
    def test_idempotent(self, name, params, reference_start, reference_target):
        first = run(name, reference_start, reference_target, **params)
        second = run(name, reference_start, reference_target, **params)
        assert first.status is second.status
        assert first.moves == second.moves

    @pytest.mark.parametrize("name,params", ALL_STRATEGIES)
    def test_shape_mismatch_rejected(self, name, params, reference_start):
        with pytest.raises(ValueError):
            run(name, reference_start, BoardState.from_string("KBB/RR./..."), **params)

    @pytest.mark.parametrize("name,params", DETERMINISTIC)
    def test_caller_boards_unchanged(self, name, params, reference_start, reference_target):
        run(name, reference_start, reference_target, **params)
        assert reference_start.to_string() == "KBB/RR."
        assert reference_target.to_string() == ".BB/RRK"

    @pytest.mark.parametrize("name,params", [
        ("dfs", {"max_depth": 0}),
        ("dfs", {"max_depth": -3}),
        ("backtracking", {"max_depth": 0}),
        ("trial_error", {"max_attempts": 0}),
        ("trial_error_depth", {"max_attempts": 5, "depth_bound": 0}),
        ("trial_error_depth", {"max_attempts": -1}),
        ("dfs", {"max_depth": True}),
        ("dfs", {"max_depth": 2.5}),
    ])
    def test_bad_parameters_fail_fast(self, name, params):
        with pytest.raises(SolverParameterError):
            create_strategy(name, **params)
