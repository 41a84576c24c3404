import hypothesis
import pytest

from msgversions import ALL, NONE

# disable hypothesis deadline globally
hypothesis.settings.register_profile("ci", deadline=None)
hypothesis.settings.load_profile("ci")


@pytest.fixture(params=[ALL, NONE], ids=["all", "none"])
def constant_range(request):
    return request.param
