"""Entry points for ALMANAC.

Thin front ends (currently the ``almanac`` command line) that parse user input,
call `almanac.bootstrap` and the domain functions, and render results.
"""
