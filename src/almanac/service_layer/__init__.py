"""Service layer for ALMANAC.

Application services that orchestrate domain rules over the interfaces, such
as resolving timezone abbreviations against a rule provider.
"""
