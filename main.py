"""Development server for the colour-picker JSON service.

Usage
-----
$ pip install -e .
$ python main.py            # starts on http://127.0.0.1:5000

Settings can be overridden with COLOR_PICKER_* environment variables,
e.g. COLOR_PICKER_PICKER_SCREEN_WIDTH=428.
"""

from __future__ import annotations

from color_picker.app import create_app

if __name__ == "__main__":
    create_app().run(debug=False, threaded=True)
