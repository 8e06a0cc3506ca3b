"""
Minishift - single-node OpenShift clusters for local development

This package carries the profile bootstrap that runs before every
minishift command: profile selection, on-disk layout, configuration
merging and post-upgrade maintenance.
"""

__version__ = "1.34.3"
__commit_sha__ = "unknown"
__all__ = ["__version__"]
