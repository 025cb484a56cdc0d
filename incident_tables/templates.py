# incident_tables/templates.py
"""
Source templates: where to fetch, what shape to extract, how to post-process.

Templates are built once at import and never change. The HTTP layer looks
one up, runs the extractor with `extraction`, then hands the extractor's
result to `post_process` together with the app-owned geocode enricher.
"""
from dataclasses import dataclass
from typing import Any, Dict

from .extraction import ExtractionSpec
from .normalizers.dates import EPOCH_BOUNDARY
from .normalizers.geocode import GeocodeEnricher
from .normalizers.pipeline import PostProcessor, school_shootings_processor, single_year_processor

WIKIPEDIA = "https://en.wikipedia.org/wiki/"
CONTAINER = "#bodyContent"
TABLE_ROWS = ".wikitable tbody tr"


@dataclass(frozen=True)
class Template:
    name: str
    route: str
    source_url: str
    extraction: ExtractionSpec
    root_key: str
    post_processor: PostProcessor

    def post_process(self, unparsed: Any, enricher: GeocodeEnricher) -> Any:
        return self.post_processor(unparsed, enricher)

    def describe(self) -> Dict[str, Any]:
        """Plain-dict view for listing endpoints."""
        return {
            "name": self.name,
            "route": self.route,
            "source_url": self.source_url,
            "root_key": self.root_key,
            "container_selector": self.extraction.container_selector,
            "row_selector": self.extraction.row_selector,
            "row_shape": dict(self.extraction.row_shape),
        }


def _row_shape(description_column: int) -> Dict[str, str]:
    # The school list has no "total" column, so its description sits one column earlier.
    return {
        "date": "td:nth-child(1)",
        "location": "td:nth-child(2)",
        "deaths": "td:nth-child(3)",
        "injuries": "td:nth-child(4)",
        "description": f"td:nth-child({description_column})",
    }


def _wikipedia_table(description_column: int) -> ExtractionSpec:
    return ExtractionSpec(
        container_selector=CONTAINER,
        row_selector=TABLE_ROWS,
        row_shape=_row_shape(description_column),
    )


SCHOOL_SHOOTINGS = Template(
    name="school_shootings",
    route="/wikipedia-school-shootings",
    source_url=WIKIPEDIA + "List_of_school_shootings_in_the_United_States",
    extraction=_wikipedia_table(5),
    root_key="school_shootings",
    post_processor=school_shootings_processor("school_shootings"),
)

MASS_SHOOTINGS_PRE_2018 = Template(
    name="mass_shootings_pre_2018",
    route="/wikipedia-mass-shootings-pre-2018",
    source_url=WIKIPEDIA + "List_of_mass_shootings_in_the_United_States",
    extraction=_wikipedia_table(6),
    root_key="mass_shootings_pre_2018",
    post_processor=single_year_processor("mass_shootings_pre_2018", before=EPOCH_BOUNDARY),
)

MASS_SHOOTINGS_2018 = Template(
    name="mass_shootings_2018",
    route="/wikipedia-mass-shootings-2018",
    source_url=WIKIPEDIA + "List_of_mass_shootings_in_the_United_States_in_2018",
    extraction=_wikipedia_table(6),
    root_key="mass_shootings_2018",
    post_processor=single_year_processor("mass_shootings_2018"),
)

MASS_SHOOTINGS_2019 = Template(
    name="mass_shootings_2019",
    route="/wikipedia-mass-shootings-2019",
    source_url=WIKIPEDIA + "List_of_mass_shootings_in_the_United_States_in_2019",
    extraction=_wikipedia_table(6),
    root_key="mass_shootings_2019",
    post_processor=single_year_processor("mass_shootings_2019"),
)

TEMPLATES: Dict[str, Template] = {
    t.name: t
    for t in (SCHOOL_SHOOTINGS, MASS_SHOOTINGS_PRE_2018, MASS_SHOOTINGS_2018, MASS_SHOOTINGS_2019)
}


def get_template(name: str) -> Template:
    try:
        return TEMPLATES[name]
    except KeyError:
        raise KeyError(f"unknown template: {name}") from None
