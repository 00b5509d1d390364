from typing import Callable, Dict, List, Optional

from pydantic import BaseModel, ConfigDict

from optional_records.lookup.finder import find_first
from optional_records.models.option import Option

from . import (
    combining_optionals,
    optional_finder,
    optional_in_streams,
    optional_mapping,
    traditional_finder,
)


class Demo(BaseModel):
    """A runnable demonstration and how to present it."""

    model_config = ConfigDict(frozen=True)

    name: str
    title: str
    runner: Callable[..., List[str]]
    accepts_query: bool = False
    fails_on_miss: bool = False  # Raises AttributeError when the lookup misses


DEMOS: Dict[str, Demo] = {
    demo.name: demo
    for demo in (
        Demo(
            name="traditional",
            title="Lookup returning None",
            runner=traditional_finder.run,
            accepts_query=True,
            fails_on_miss=True,
        ),
        Demo(
            name="finder",
            title="Lookup returning an Option",
            runner=optional_finder.run,
            accepts_query=True,
        ),
        Demo(
            name="mapping",
            title="Transforming an Option",
            runner=optional_mapping.run,
            accepts_query=True,
        ),
        Demo(
            name="combining",
            title="Combining two Options",
            runner=combining_optionals.run,
        ),
        Demo(
            name="streams",
            title="Aggregating a collection",
            runner=optional_in_streams.run,
        ),
    )
}


def find_demo(name: str) -> Option[Demo]:
    return find_first(DEMOS.values(), name, lambda demo: demo.name)


def run_demo(demo: Demo, query: Optional[str] = None) -> List[str]:
    """Runs ``demo``, forwarding ``query`` only to demos that take one."""
    if demo.accepts_query and query:
        return demo.runner(query=query)
    return demo.runner()
