# tests/utils/constants.py

# most verbose level, so failing tests show everything
DEFAULT_TEST_LOG_LEVEL = "test"
