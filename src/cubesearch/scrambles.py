import argparse
import json
import os
import random

from .cube import Cube3x3x3
from .errors import SolveError
from .moves import format_moves, scramble
from .search import IterativeDeepeningSearch


def generate_scramble(length, rng=None, max_depth=None):
    """
    Generate a scramble whose restricted-move solution length is exactly 'length'.

    Args:
        length: The target solution length
        rng: random.Random instance used for the scramble moves
        max_depth: Search bound for measuring the solution (defaults to length)

    Returns:
        dict: {"scramble", "solution", "kociemba"} if a match is found, None otherwise
    """
    rng = rng or random.Random()

    # Scramble a new cube with a few more moves than the target
    c, moves = scramble(Cube3x3x3.solved(), rng.randint(length, length + 3), rng)

    search = IterativeDeepeningSearch(max_depth=length if max_depth is None else max_depth)
    try:
        solution = search.search(c)
    except SolveError:
        return None

    if len(solution) != length:
        return None

    return {
        "scramble": format_moves(moves),
        "solution": format_moves(solution),
        "kociemba": c.to_kociemba_string(),
    }


def generate_scrambles_for_level(n, target_count=1000, output_dir="scrambles", rng=None, max_attempts=None):
    """Generate scrambles for a specific difficulty level and save them as JSON lines.

    Args:
        n: Solution length of every generated scramble
        target_count: How many scrambles to write
        output_dir: Directory for the "<n>movescramble.txt" file
        rng: random.Random instance, for reproducible output
        max_attempts: Stop after this many attempts even if target_count is not reached

    Returns:
        str: Path of the written file
    """
    rng = rng or random.Random()
    os.makedirs(output_dir, exist_ok=True)
    output_file = os.path.join(output_dir, f"{n}movescramble.txt")

    print(f"Generating {target_count} scrambles with solution length {n}...")
    print(f"Will save to {output_file}")

    count = 0
    attempt = 0

    with open(output_file, "w") as f:
        while count < target_count:
            if max_attempts is not None and attempt >= max_attempts:
                print(f"Gave up after {attempt} attempts")
                break

            result = generate_scramble(n, rng)
            attempt += 1

            if result:
                f.write(json.dumps(result) + "\n")
                count += 1
                if count % 100 == 0:
                    print(f"Generated {count}/{target_count} scrambles ({attempt} attempts)")

    print(f"Saved {count} scrambles to {output_file}")
    return output_file


def load_scrambles(filepath, limit=None):
    """
    Load scrambles from a JSON-lines file.

    Lines that are blank or not valid JSON are skipped.

    Returns:
        List of scramble data dictionaries
    """
    scrambles = []
    with open(filepath, 'r') as f:
        for line in f:
            line = line.strip()
            if not line:
                continue
            try:
                scrambles.append(json.loads(line))
            except json.JSONDecodeError:
                continue
            if limit is not None and len(scrambles) >= limit:
                break
    return scrambles


def main(argv=None):
    parser = argparse.ArgumentParser(description='Generate scrambles with specific solution lengths')
    parser.add_argument('--level', type=int, required=True,
                        help='Target solution length to generate scrambles for')
    parser.add_argument('--count', type=int, default=1000,
                        help='Number of scrambles to generate')
    parser.add_argument('--output-dir', default='scrambles',
                        help='Directory to write the scramble file into')
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed for reproducible scrambles')

    args = parser.parse_args(argv)

    if args.level < 0:
        parser.error("--level must be non-negative")

    generate_scrambles_for_level(args.level, args.count, args.output_dir, random.Random(args.seed))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
