""" check the export list to ensure only the public API is exported by gpgkeylist.__init__
"""
import pytest

import importlib
import inspect


modules = ['gpgkeylist.constants',
           'gpgkeylist.errors',
           'gpgkeylist.listing',
           'gpgkeylist.types']


def get_module_objs(module):
    # return a set of strings that represent the names of objects defined in that module
    return {n for n, o in inspect.getmembers(module, lambda m: inspect.getmodule(m) is module) if not n.startswith('_')}


def get_module_all(module):
    return set(getattr(module, '__all__', set()))


def test_gpgkeylist_all():
    import gpgkeylist
    # just check that everything in gpgkeylist.__all__ is actually there
    assert set(gpgkeylist.__all__) <= {n for n, _ in inspect.getmembers(gpgkeylist)}


@pytest.mark.parametrize('modname', modules)
def test_exports(modname):
    module = importlib.import_module(modname)

    # module-level constants are not picked up by inspect.getmodule, so only check that they exist
    assert get_module_objs(module) <= get_module_all(module)
    assert all(hasattr(module, n) for n in get_module_all(module))
