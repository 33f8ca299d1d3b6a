
def pytest_addoption(parser):
    parser.addoption("--quick", action="store_true",
                     default=False, help="skip tests using the slow fixture, "
                     "such as diffs of large generated documents")
