"""Locale package for i18n JSON resources.

One ``<locale>.json`` file per supported locale (``en-US``, ``de-DE``,
``de-AT``), read via importlib.resources. Values are plain strings, arrays
of twelve month names, or small objects describing a one-argument template:

* ``{"template": "Up to {value} users"}``
* ``{"one": "... {value} day!", "other": "... {value} days!"}``, where
  ``other`` is used when the argument is greater than one
* ``{"literal": "&copy; {year} ..."}``, stamped with the current year on load
"""
