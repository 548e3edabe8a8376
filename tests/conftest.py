"""Expand testscenarios scenarios into per-scenario classes for pytest.

pytest binds the test method onto the collected instance, which breaks
testscenarios' run-time cloning; expanding the scenarios at collection
time runs every scenario the way stestr/unittest would.
"""
import inspect
import unittest

from _pytest.unittest import UnitTestCase


class ScenarioTestCase(UnitTestCase):

    def __init__(self, *args, scenario_class=None, **kwargs):
        self._scenario_class = scenario_class
        super().__init__(*args, **kwargs)

    def _getobj(self):
        return self._scenario_class


def pytest_pycollect_makeitem(collector, name, obj):
    if not (inspect.isclass(obj) and issubclass(obj, unittest.TestCase)):
        return None
    scenarios = getattr(obj, 'scenarios', None)
    if not scenarios:
        return None
    items = []
    for scenario_name, params in scenarios:
        attrs = dict(params)
        attrs['scenarios'] = None
        attrs['__module__'] = obj.__module__
        sub = type(obj.__name__, (obj,), attrs)
        items.append(ScenarioTestCase.from_parent(
            collector, name='{0}[{1}]'.format(name, scenario_name),
            scenario_class=sub))
    return items
