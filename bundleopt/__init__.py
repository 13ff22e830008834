"""bundleopt: resolves the packaging optimizations for split application builds.

A build configuration can ask for extra split dimensions, drop default ones,
and pin whether native libraries ship uncompressed. What it does not say is
filled in from the tool's version-dependent default policy, so a config
written against an older tool keeps producing the same splits.

Core workflows:
- Resolve: layer defaults, config directives and an optional override set
- Inspect: print the default policy table for any tool version
"""
