"""Command-line interface for the Sudoku puzzle generator."""

import argparse
import logging
import sys

from .core.board import SudokuBoard, InvalidGridError
from .core.validator import count_solutions
from .generator import SudokuGenerator, Difficulty
from .solvers import BacktrackingSolver
from .benchmark import GenerationBenchmark

DIFFICULTY_CHOICES = [d.value for d in Difficulty] + ["all"]


def main(argv=None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Sudoku Puzzle Generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Generate 5 medium difficulty puzzles
  sudokugen generate --count 5 --difficulty medium

  # Check whether a puzzle has a unique solution
  sudokugen check --puzzle "530070000600195000..."

  # Time generation across all difficulties
  sudokugen benchmark --puzzles 10 --output results/
        """
    )
    parser.add_argument(
        "--log-level", default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate command
    gen_parser = subparsers.add_parser("generate", help="Generate Sudoku puzzles")
    gen_parser.add_argument(
        "--count", "-n", type=int, default=1,
        help="Number of puzzles to generate (default: 1)"
    )
    gen_parser.add_argument(
        "--difficulty", "-d",
        choices=DIFFICULTY_CHOICES,
        default="medium",
        help="Difficulty level (default: medium)"
    )
    gen_parser.add_argument(
        "--seed", "-s", type=int, default=None,
        help="Random seed for reproducibility"
    )

    # Solve command
    solve_parser = subparsers.add_parser("solve", help="Solve a Sudoku puzzle")
    solve_parser.add_argument(
        "--puzzle", "-p", type=str, required=True,
        help="Puzzle string (81 chars, 0 or . for empty cells)"
    )
    solve_parser.add_argument(
        "--seed", "-s", type=int, default=None,
        help="Random seed for the candidate order"
    )
    solve_parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Show detailed solving statistics"
    )

    # Check command
    check_parser = subparsers.add_parser("check", help="Count the solutions of a puzzle")
    check_parser.add_argument(
        "--puzzle", "-p", type=str, required=True,
        help="Puzzle string (81 chars, 0 or . for empty cells)"
    )
    check_parser.add_argument(
        "--max-count", "-m", type=int, default=2,
        help="Stop counting after this many solutions (default: 2)"
    )

    # Benchmark command
    bench_parser = subparsers.add_parser("benchmark", help="Benchmark puzzle generation")
    bench_parser.add_argument(
        "--puzzles", "-n", type=int, default=10,
        help="Puzzles per difficulty (default: 10)"
    )
    bench_parser.add_argument(
        "--difficulty", "-d",
        choices=DIFFICULTY_CHOICES,
        default="all",
        help="Difficulty to benchmark (default: all)"
    )
    bench_parser.add_argument(
        "--output", "-o", type=str, default="results",
        help="Output directory for results (default: results)"
    )
    bench_parser.add_argument(
        "--seed", "-s", type=int, default=42,
        help="Random seed for reproducibility (default: 42)"
    )
    bench_parser.add_argument(
        "--no-charts", action="store_true",
        help="Skip chart generation"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    if args.command == "generate":
        cmd_generate(args)
    elif args.command == "solve":
        cmd_solve(args)
    elif args.command == "check":
        cmd_check(args)
    elif args.command == "benchmark":
        cmd_benchmark(args)


def _parse_difficulties(value):
    if value == "all":
        return list(Difficulty)
    return [Difficulty(value)]


def _parse_puzzle(text):
    try:
        return SudokuBoard.from_string(text)
    except InvalidGridError as e:
        print(f"Error parsing puzzle: {e}")
        sys.exit(1)


def cmd_generate(args):
    """Handle the generate command."""
    generator = SudokuGenerator(seed=args.seed)
    total = 0

    for difficulty in _parse_difficulties(args.difficulty):
        print(f"\nGenerating {args.count} {difficulty.value} puzzles...")

        for i in range(1, args.count + 1):
            puzzle = generator.generate(difficulty)
            stats = generator.last_stats
            total += 1

            print(f"\n--- {difficulty.value.capitalize()} Puzzle {i} ({puzzle.count_filled()} clues) ---")
            if stats.shortfall:
                print(f"Note: only {stats.removed} of {stats.requested} cells could be removed")
            print(puzzle)
            print(puzzle.to_string())

    print(f"\nTotal puzzles generated: {total}")


def cmd_solve(args):
    """Handle the solve command."""
    board = _parse_puzzle(args.puzzle)

    print("Input puzzle:")
    print(board)
    print()

    solver = BacktrackingSolver(seed=args.seed)
    solution, stats = solver.solve(board)

    if stats.solved:
        print(f"✓ Solved in {stats.time_seconds:.4f}s")
        if args.verbose:
            print(f"  Iterations: {stats.iterations:,}")
            print(f"  Backtracks: {stats.backtracks:,}")
            print(f"  Memory: {stats.memory_bytes / 1024:.2f} KB")
        print(solution)
    else:
        print("✗ No solution exists")
        if args.verbose:
            print(f"  Time: {stats.time_seconds:.4f}s")
            print(f"  Iterations: {stats.iterations:,}")
        sys.exit(2)


def cmd_check(args):
    """Handle the check command."""
    board = _parse_puzzle(args.puzzle)

    if args.max_count < 1:
        print("Error: --max-count must be at least 1")
        sys.exit(1)

    count = count_solutions(board, max_count=args.max_count)
    bound = "+" if count >= args.max_count else ""

    print(f"Clues: {board.count_filled()}")
    print(f"Solutions: {count}{bound}")
    print(f"Unique: {'yes' if count == 1 else 'no'}")


def cmd_benchmark(args):
    """Handle the benchmark command."""
    difficulties = _parse_difficulties(args.difficulty)

    print("=" * 60)
    print("SUDOKU GENERATION BENCHMARK")
    print("=" * 60)
    print(f"Puzzles per difficulty: {args.puzzles}")
    print(f"Difficulties: {[d.value for d in difficulties]}")
    print(f"Output directory: {args.output}")
    print("=" * 60)

    benchmark = GenerationBenchmark(
        puzzles_per_difficulty=args.puzzles,
        difficulties=difficulties,
        seed=args.seed
    )
    results = benchmark.run()
    summary = benchmark.get_summary()

    print("\n" + "=" * 60)
    print("RESULTS SUMMARY")
    print("=" * 60)

    for diff, stats in summary["results_by_difficulty"].items():
        print(f"\n{diff}:")
        print(f"  Avg Time: {stats['avg_time_seconds']:.4f}s")
        print(f"  Avg Clues: {stats['avg_clues']:.1f} (min {stats['min_clues']}, max {stats['max_clues']})")
        print(f"  Short puzzles: {stats['short_puzzles']}/{stats['tested']}")
        print(f"  Avg uniqueness checks: {stats['avg_uniqueness_checks']:.1f}")

    benchmark.save_results(args.output)

    if not args.no_charts:
        from .benchmark.visualizer import Visualizer

        print("\nGenerating charts...")
        visualizer = Visualizer(results, args.output)
        charts = visualizer.generate_all()
        visualizer.generate_summary_table()
        print(f"Charts saved to {args.output}/")
        for chart in charts:
            print(f"  - {chart.split('/')[-1]}")

    print("\n" + "=" * 60)
    print("Benchmark complete!")


if __name__ == "__main__":
    main()
