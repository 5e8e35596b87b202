"""
===============================================================================
HAMILTON - Demonstration Program Tests
===============================================================================
Config loading/validation and the demonstration output of main.py.
===============================================================================
"""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pytest
import yaml

import main
from hamilton.quaternion import Quaternion


@pytest.fixture
def config():
    """Default demonstration config shipped in config/."""
    return main.load_config()


@pytest.fixture
def operands(config):
    return main.build_operands(config)


class TestConfig:
    """Loading and validating the demo configuration."""

    def test_default_config_path_exists(self):
        assert main.DEFAULT_CONFIG.exists()
        assert main.DEFAULT_CONFIG == main.PROJECT_ROOT.parent.parent / 'config' / 'demo_config.yaml'

    def test_default_config_loads(self, config):
        assert set(config) >= {'quaternions', 'complex_pairs', 'scalars'}

    def test_operands_built(self, operands):
        assert operands['a'] == Quaternion(1, 0, 1, 0)
        assert operands['a'].dtype.name == 'int64'
        assert operands['c'].dtype.name == 'float32'
        assert operands['ca'] == 1 + 2j

    def test_missing_section(self, tmp_path):
        path = tmp_path / 'bad.yaml'
        path.write_text(yaml.safe_dump({'quaternions': {}}))
        with pytest.raises(ValueError, match="quaternions"):
            main.load_config(str(path))

    def test_wrong_component_count(self, config):
        config['quaternions']['a']['components'] = [1, 2, 3]
        with pytest.raises(ValueError, match="4 components"):
            main.validate_config(config)

    def test_bad_complex_pair(self, config):
        config['complex_pairs']['ca'] = [1]
        with pytest.raises(ValueError, match="real, imag"):
            main.validate_config(config)

    def test_bad_dtype(self, config):
        config['quaternions']['a']['dtype'] = 'complex128'
        with pytest.raises(TypeError):
            main.build_operands(config)


class TestDemo:
    """Lines printed by the demonstration."""

    def test_lines(self, operands):
        lines = main.run_demo(operands)
        assert len(lines) == 22
        assert lines[0] == "Real part of (1,0,1,0) is 1"
        assert lines[2] == "Component of (1,0,1,0) is 1, 0, 1, 0"
        assert lines[3] == "Norm of (1,0,1,0) is 2"
        assert lines[9] == "(1,0,1,0) + 3 = (4,0,1,0)"
        assert lines[17] == ("Construct quaternion from complex (1.0,2.0) and "
                             "(3.0,4.0) = (1.0,2.0,3.0,4.0)")
        assert lines[-3:] == [
            "(1,0,1,0) is NaN? false",
            "(1,0,1,0) is infinite? false",
            "(1,0,1,0) is finite? true",
        ]

    def test_main_prints_demo(self, capsys):
        assert main.main([]) == 0
        out = capsys.readouterr().out
        assert "Conjugate of (1.0,0.5,0.5,0.75) is (1.0,-0.5,-0.5,-0.75)" in out
        assert "has complex component (1.0,2.0) and (3.0,4.0)" in out
