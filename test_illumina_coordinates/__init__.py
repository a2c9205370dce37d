"""
Unit tests and supporting files for illumina_coordinates.

The package structure of test_illumina_coordinates mirrors the package
structure of illumina_coordinates, with one or more test cases per class or
function.  When test cases need supporting files (input used to run a test, or
expected output for comparison with results) they refer to a path within
test_illumina_coordinates/data/<module>/<class> corresponding to the location
of the test case code.  This is handled by TestBase.

test_config.yml at the top of the repository can send per-class test timings
to a log file.
"""
