"""Tests that the PathResolver Protocol is satisfied by the prompt resolver."""

import io

from quiz_run.path.domain.resolver import PathResolver
from quiz_run.path.infrastructure.prompt_resolver import PromptPathResolver
from tests.path.fake_observer import FakePathObserver


class TestPathResolverProtocol:
    """PromptPathResolver satisfies the PathResolver structural protocol."""

    def test_prompt_resolver_satisfies_protocol(self) -> None:
        resolver: PathResolver = PromptPathResolver(observer=FakePathObserver())

        assert resolver.resolve(default_path="q.csv", stdin=io.StringIO("\n")) == "q.csv"
