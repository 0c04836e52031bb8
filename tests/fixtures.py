# type: ignore
import shutil

import pytest

import pollock.compile.asm as asm

import unit_utils


@pytest.fixture
def settings():
    yield asm.AsmSettings()


@pytest.fixture
def hello_source(tmp_path):
    source = tmp_path / 'hello.plk'
    shutil.copy(unit_utils.find_file('testdata/hello.plk'), source)
    yield source
