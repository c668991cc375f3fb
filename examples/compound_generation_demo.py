"""Demonstration script for seeded compound generation."""
import logging
import sys

from pychemgen import create_generator, generate_compound
from pychemgen.parsing.config import DEFAULT_CONFIG_PATH


def setup_logging():
    """Setup logging configuration."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s -> %(message)s"
    )


def demonstrate_compound_generation(first_seed: int = 0, count: int = 15):
    """Generate compounds for a range of seeds and print them."""
    setup_logging()
    generator = create_generator(DEFAULT_CONFIG_PATH)
    print(f"\n{'=' * 80}")
    print(f"{'SEED':<8}{'NAME':<40}{'FORMULA':<20}")
    print(f"{'=' * 80}")
    for seed in range(first_seed, first_seed + count):
        compound = generator.generate(seed)
        if compound is None:
            print(f"{seed:<8}{'(no compound this round)':<40}")
        else:
            print(f"{seed:<8}{compound.name:<40}{compound.formula:<20}")
    print(f"\n{'=' * 80}")
    print("WITH RETRIES")
    print(f"{'=' * 80}")
    for seed in range(first_seed, first_seed + 5):
        compound = generate_compound(seed, generator)
        print(f"{seed:<8}{compound.name if compound else '-':<40}{compound.formula if compound else '':<20}")


if __name__ == "__main__":
    start = int(sys.argv[1]) if len(sys.argv) > 1 else 0
    demonstrate_compound_generation(start)
