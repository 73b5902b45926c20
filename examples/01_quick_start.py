#!/usr/bin/env python3
"""Quick Start Example

This example shows the most basic usage of pycircularprogressqt:
- Creating a ring widget with the default configuration
- Reacting to progress and completion
- Displaying the widget
"""

import sys

from PySide6 import QtWidgets

from pycircularprogressqt import CircularProgressWidget


def main():
    """Run the quick start example."""
    app = QtWidgets.QApplication(sys.argv)

    ring = CircularProgressWidget()
    ring.resize(360, 360)

    ring.progressChanged.connect(lambda f: print(f"progress {f:.0%}"))
    ring.completedChanged.connect(lambda done: print("completed" if done else "not completed"))

    ring.show()
    sys.exit(app.exec())

if __name__ == "__main__":
    main()
