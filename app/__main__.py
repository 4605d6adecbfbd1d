"""Run the launcher: `python app <tool> [args]`.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from ldap_sdk.tools.launcher import run

if __name__ == "__main__":
    run()
