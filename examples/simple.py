"""
Print total time per application for the bundled sample log.
"""

from pathlib import Path

from apptotals import group_totals


def main():
    stats = group_totals(Path(__file__).parent / "simple-data.json")

    for stat in stats.values():
        print(f"{stat.name}: {stat.total_time}")


if __name__ == "__main__":
    main()
