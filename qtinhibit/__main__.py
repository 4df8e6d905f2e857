import sys

from .main import main_cli

# argv[0] is the path of this file under "python -m"
main_cli(["qtinhibit", *sys.argv[1:]])
