import argparse
import sys
from pathlib import Path

from menutree.config import settings
from menutree.logging import LoggerFactory, setup_logging
from menutree.menu import ControlSignal, MenuEngine
from menutree.ui.console import ConsolePresenter


class Counter:
    def __init__(self):
        self.value = 0

    def increment(self):
        self.value += 1
        return ControlSignal.RETURN

    def show(self):
        print(f"Counter: {self.value}")
        return ControlSignal.PAUSE

    def reset(self):
        self.value = 0
        print("Counter reset")
        return ControlSignal.PAUSE


def build_demo_menu(presenter, counter=None):
    """Build the demo tree: Main > Settings > Advanced."""
    counter = counter or Counter()

    root = MenuEngine(presenter, title="Main")
    root.push("Increment counter", Counter.increment, counter)
    root.push("Show counter", "show", counter)

    settings_menu = MenuEngine(presenter, title="Settings", exit_text="Back")

    def toggle_clear_screen():
        presenter.clear_on_start = not presenter.clear_on_start
        state = "on" if presenter.clear_on_start else "off"
        print(f"Clear screen: {state}")
        return ControlSignal.PAUSE

    settings_menu.push("Toggle clear screen", toggle_clear_screen)

    advanced = MenuEngine(presenter, title="Advanced", exit_text="Back")
    advanced.push("Reset counter", Counter.reset, counter)
    advanced.push("Quit demo", lambda: ControlSignal.QUIT)

    settings_menu.push_submenu("Advanced", advanced, propagate_quit=True)
    root.push_submenu("Settings", settings_menu, propagate_quit=True)
    return root


def main(argv=None):
    parser = argparse.ArgumentParser(description="menutree demo menu")
    parser.add_argument("-d", "--debug", action="store_true", help="Enable verbose debug output")
    parser.add_argument("--trace", action="store_true", help="Log every rendered item")
    parser.add_argument("--log-dir", type=Path, default=None, help="Directory for log files")
    parser.add_argument("--separator", default=None, help="Breadcrumb separator text")
    args = parser.parse_args(argv)

    setup_logging(debug=args.debug, trace=args.trace, log_dir=args.log_dir)
    log = LoggerFactory.for_system()
    settings.load_settings()

    overrides = {}
    if args.separator is not None:
        overrides["separator"] = args.separator
    presenter = ConsolePresenter.from_settings(**overrides)
    root = build_demo_menu(presenter)

    log.info("Demo menu started")
    try:
        reason = root.run()
    except (KeyboardInterrupt, EOFError):
        print()
        log.info("Demo menu interrupted")
        return 0
    log.info(f"Demo menu finished ({reason.value})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
