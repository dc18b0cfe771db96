import pytest

from plant_palette.models import FoliageType, LightRequirement, Plant, PlantCategory, SoilType


def make_plant(pid="p001", **overrides) -> Plant:
    fields = dict(
        id=pid,
        name=f"Plant {pid}",
        scientific_name=f"Planta {pid}",
        category=PlantCategory.HERBS,
        native=True,
        native_details="Yes",
        foliage=FoliageType.EVERGREEN,
        dimensions="30cm x 30cm",
        appearance="Green.",
        conditions="Sun.",
        ecological_importance="Bees.",
        light_tags=(LightRequirement.SUN,),
        soil_tags=(SoilType.WELL_DRAINED,),
    )
    fields.update(overrides)
    return Plant(**fields)


@pytest.fixture
def sample_catalogue():
    return (
        make_plant("p001", name="Thyme", scientific_name="Thymus vulgaris",
                   native=False, soil_tags=(SoilType.GRITTY, SoilType.WELL_DRAINED)),
        make_plant("p002", name="Foxglove", scientific_name="Digitalis purpurea",
                   category=PlantCategory.FLOWERS_PERENNIALS, foliage=FoliageType.BIENNIAL,
                   light_tags=(LightRequirement.PARTIAL_SHADE, LightRequirement.SHADE),
                   soil_tags=(SoilType.MOIST,)),
        make_plant("p003", name="Lavender", scientific_name="Lavandula angustifolia",
                   category=PlantCategory.SHRUBS, native=False),
        make_plant("p004", name="Rosemary", scientific_name="Salvia rosmarinus",
                   native=False, soil_tags=None),
        make_plant("p005", name="Hart's-tongue Fern", scientific_name="Asplenium scolopendrium",
                   category=PlantCategory.FERNS, light_tags=(LightRequirement.SHADE,),
                   soil_tags=()),
        make_plant("p006", name="Pampas Grass", scientific_name="Cortaderia selloana",
                   category=PlantCategory.GRASSES, native=False, not_recommended=True,
                   limitations="Far too large."),
    )
