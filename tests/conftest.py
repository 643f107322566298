"""gpgkeylist conftest"""
import pytest

import os
import sys

# set the CWD and add to sys.path if we need to
os.chdir(os.path.join(os.path.abspath(os.path.dirname(__file__)), os.pardir))

if os.getcwd() not in sys.path:
    sys.path.insert(0, os.getcwd())
else:
    sys.path.insert(0, sys.path.pop(sys.path.index(os.getcwd())))

if os.path.join(os.getcwd(), 'tests') not in sys.path:
    sys.path.insert(1, os.path.join(os.getcwd(), 'tests'))


def _read(f, mode='r'):
    with open(f, mode) as ff:
        return ff.read()


@pytest.fixture(scope='session')
def pubring():
    return _read('tests/testdata/listings/pubring.txt')


@pytest.fixture(scope='session')
def secring():
    return _read('tests/testdata/listings/secring.txt')


@pytest.fixture(scope='session')
def gnupg2_pubring():
    return _read('tests/testdata/listings/gnupg2.txt')


# pytest hooks

# pytest_configure
# called after command line options have been parsed and all plugins and initial conftest files been loaded.
def pytest_configure(config):
    from gpgkeylist._author import __version__

    print("== gpgkeylist Test Suite ==")

    # display the working directory and the package version
    print("Working Directory: " + os.getcwd())
    print("Using gpgkeylist " + str(__version__))
    print("")
