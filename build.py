import PyInstaller.__main__
from pathlib import Path

# Define project root
PROJECT_ROOT = Path(__file__).parent


def build():
    print("Building CAD Organizer executable...")

    args = [
        'main.py',                        # Entry point
        '--name=CadOrganizer',            # Name of the executable
        '--onefile',                      # Single console executable
        '--console',
        '--clean',                        # Clean cache
        '--noconfirm',                    # Replace output directory without asking

        # Paths
        f'--paths={PROJECT_ROOT}',

        # Hidden imports (often missed by PyInstaller analysis)
        '--hidden-import=dotenv',
        '--hidden-import=logging.handlers',
        '--hidden-import=cad_organizer',
        '--hidden-import=cad_organizer.config',
    ]

    PyInstaller.__main__.run(args)
    print("Build complete. Check the 'dist' folder for CadOrganizer.")


if __name__ == "__main__":
    build()
