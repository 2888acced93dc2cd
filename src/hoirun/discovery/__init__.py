from hoirun.discovery.facter_plugins import find_facter_dirs

__all__ = ["find_facter_dirs"]
