"""Package entry point for ``python -m tategaki_converter``.

WHY: Users run the converter as ``python -m tategaki_converter 今日は晴れだ``
without installing the console script.

HOW: Delegates to the CLI's main() function.
"""

from tategaki_converter.cli import main

if __name__ == "__main__":
    main()
