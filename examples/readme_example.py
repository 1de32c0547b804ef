from pathlib import Path

from unidiffs import DiffSettings, DiffStack, LocalUniverse
from unidiffs.logger import configure_logging
from unidiffs.persistence import dumps, loads

CATALOG = Path(__file__).parent / "dat" / "unidiff.xml"


def build_universe() -> LocalUniverse:
    universe = LocalUniverse()
    traders = universe.register_generator("Traders")
    universe.register_generator("Pirates")
    universe.add_region("Gamma", members=["Gamma Prime"], generators=[(traders, 50)])
    universe.add_region("Delta", members=["Delta Station"])
    return universe


def print_universe(universe: LocalUniverse) -> None:
    for region, state in universe.snapshot().items():
        print(f"  {region}: members={state['members']} generators={state['generators']}")


def main() -> None:
    settings = DiffSettings(catalog_path=str(CATALOG), log_level="INFO")
    configure_logging(settings.log_level)

    universe = build_universe()
    stack = DiffStack(universe, settings=settings)

    print("Initial universe:")
    print_universe(universe)

    # A mission script triggers two diffs
    stack.apply("Pirate Uprising")
    stack.apply("Frontier Outpost")  # "Militia" is not registered: one hunk fails
    print(f"Applied: {stack.names}")
    print_universe(universe)

    saved = dumps(stack)
    print(f"Saved: {saved}")

    stack.remove("Pirate Uprising")
    print(f"After removing 'Pirate Uprising': {stack.names}")
    print_universe(universe)

    loads(stack, saved)
    print(f"Restored: {stack.names}")

    stack.clear()
    print("After clear:")
    print_universe(universe)


if __name__ == "__main__":
    main()
