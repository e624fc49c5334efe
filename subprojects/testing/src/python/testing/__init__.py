import os
from unittest import TestLoader, TestSuite, TextTestRunner

TESTSPACE = os.path.join(os.path.dirname(os.path.abspath(__file__)), "testspace")


def runTests(verbosity: int = 0):
    loader = TestLoader()
    suite = TestSuite()

    # One discovery per area, the areas are plain directories
    for area in sorted(os.listdir(TESTSPACE)):
        areaPath = os.path.join(TESTSPACE, area)
        if os.path.isdir(areaPath):
            suite.addTests(loader.discover(areaPath, top_level_dir=areaPath))

    runner = TextTestRunner(verbosity=verbosity)
    return runner.run(suite)
