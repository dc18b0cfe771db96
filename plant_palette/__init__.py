"""Filterable container-garden plant palette with PDF export."""

from .catalogue import CatalogueError, load_catalogue
from .pdf_export import export_pdf
from .filters import filter_plants
from .models import ALL, FilterState, FoliageType, LightRequirement, Plant, PlantCategory, SoilType
from .session import PaletteSession

__version__ = "0.1.0"
