#!/usr/bin/env python3
"""Rhyme Finder Gradio entry point.

Run ``python app.py`` to serve the page; see ``rhyme_finder.app.settings`` for
the ``RHYME_FINDER_*`` environment variables it honours.
"""

from rhyme_finder.app.app import main


if __name__ == "__main__":
    main()
