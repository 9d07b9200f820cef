# Main.py
""""" Entry point for the Decimal Text Calculator.

   Responsibilities:
   - Verify required files exist in development mode
   - With arguments: calculate them once and print the result
   - Without arguments: load configuration and start the Qt GUI

"""""
import sys
from pathlib import Path
from DecimalCalc import config_manager as config_manager, MathEngine as MathEngine, error as E


PROJECT_ROOT = Path(__file__).resolve().parent



def check_files_exist():

    """
      Fail fast if required files are missing / moved / renamed.
    """

    package_dir = PROJECT_ROOT / "DecimalCalc"

    REQUIRED = [
        package_dir / "UI.py",
        package_dir / "MathEngine.py",
        package_dir / "Grammar.py",
        package_dir / "Nodes.py",
        package_dir / "ScientificEngine.py",
        package_dir / "config_manager.py",
        PROJECT_ROOT / "config.json",
        PROJECT_ROOT / "ui_strings.json",
    ]

    missing_files = []
    for file_path in REQUIRED:
        if not file_path.exists():
            missing_files.append(file_path.name)

    if missing_files:
        print("Error: The following files are missing or in the wrong location:")
        for file_name in missing_files:
            print(f"- {file_name}")
        sys.exit(1)


def run_once(problem):

    """
    Calculate a single problem from the command line.
    Returns the process exit code.
    """

    try:
        result = MathEngine.calculate(problem)
    except E.MathError as e:
        print(f"Error {e.code}: {E.ERROR_MESSAGES.get(e.code, 'Unknown error')}", file=sys.stderr)
        print(e.message, file=sys.stderr)
        return 1

    if config_manager.load_setting_value("show_tree") == True:
        print("\n".join(result.ast.get_print_tree()))
    print(result.result)
    return 0


def main():

    """
    Keep this thin: no business logic here.
    """

    if len(sys.argv) > 1:
        sys.exit(run_once(" ".join(sys.argv[1:])))

    all_settings = config_manager.load_setting_value("all")
    print("Config loaded:", all_settings)

    # The UI owns the event loop; imported here so the CLI works without a display
    from DecimalCalc import UI as UI
    UI.main()


if __name__ == "__main__":
    check_files_exist()
    main()
