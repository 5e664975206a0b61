"""
Data models for the menuUI → Shopify CSV converter
"""
from dataclasses import dataclass, field, asdict
from typing import List, Optional, Dict, Any, Union


def _as_dict(data: Any) -> Dict[str, Any]:
    return data if isinstance(data, dict) else {}


@dataclass
class OptionsConfig:
    """
    Operator-supplied settings applied to every generated product.

    Empty strings mean "not set"; the CSV generator falls back to
    SHOPIFY_DEFAULTS for vendor, category and price.
    """
    handle: str = ""
    title: str = ""
    vendor: str = ""
    product_category: str = ""
    tags: str = ""
    primary_product: str = ""
    base_price: str = ""

    # camelCase keys used by the options form payload
    _ALIASES = {
        "productCategory": "product_category",
        "primaryProduct": "primary_product",
        "basePrice": "base_price",
    }

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'OptionsConfig':
        """Create from a dict with either snake_case or camelCase keys; unknown keys are ignored"""
        values = {}
        for key, value in (data or {}).items():
            name = cls._ALIASES.get(key, key)
            if name in cls.__dataclass_fields__:
                values[name] = "" if value is None else str(value)
        return cls(**values)

    def merged_with(self, overrides: Optional['OptionsConfig']) -> 'OptionsConfig':
        """Return a copy where every non-empty field of overrides wins"""
        merged = self.to_dict()
        if overrides is not None:
            merged.update({k: v for k, v in overrides.to_dict().items() if v})
        return OptionsConfig(**merged)


@dataclass
class BaseMap:
    """One material swatch nested under options[0] of a material entry"""
    label: Optional[str] = None
    icon: Optional[str] = None
    id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> 'BaseMap':
        data = _as_dict(data)
        return cls(label=data.get("label"), icon=data.get("icon"), id=data.get("id"))


@dataclass
class MenuOption:
    """One selectable value of a menu entry"""
    label: Optional[str] = None
    icon: Optional[str] = None
    id: Optional[str] = None
    base_maps: List[BaseMap] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> 'MenuOption':
        data = _as_dict(data)
        raw_maps = data.get("baseMaps")
        base_maps = [BaseMap.from_dict(m) for m in raw_maps] if isinstance(raw_maps, list) else []
        return cls(
            label=data.get("label"),
            icon=data.get("icon"),
            id=data.get("id"),
            base_maps=base_maps,
        )


VariantSource = Union[MenuOption, BaseMap]


@dataclass
class MenuUiEntry:
    """
    One configurable option group of the menuUI document.

    Concrete shapes are selected from the entry's type by from_dict():
    MaterialEntry, ModelEntry, or GenericEntry for anything else.
    target and visibility_config are kept as-is and never interpreted.
    """
    label: str
    type: str
    options: List[MenuOption] = field(default_factory=list)
    target: Any = None
    visibility_config: Any = None

    TYPES = ()

    def variant_sources(self) -> List[VariantSource]:
        """Items that become one variant each, in source order"""
        return list(self.options)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'MenuUiEntry':
        entry_type = data.get("type", "")
        entry_cls = GenericEntry
        for candidate in (MaterialEntry, ModelEntry):
            if entry_type in candidate.TYPES:
                entry_cls = candidate
                break
        raw_options = data.get("options") or []
        return entry_cls(
            label=data.get("label", ""),
            type=entry_type,
            options=[MenuOption.from_dict(o) for o in raw_options],
            target=data.get("target"),
            visibility_config=data.get("visibilityConfig"),
        )


@dataclass
class MaterialEntry(MenuUiEntry):
    """Material group: variants come from options[0].baseMaps only"""
    TYPES = ("material", "material change")

    def variant_sources(self) -> List[VariantSource]:
        if not self.options:
            return []
        return list(self.options[0].base_maps)


@dataclass
class ModelEntry(MenuUiEntry):
    """Model group: each option is a variant"""
    TYPES = ("model",)


@dataclass
class GenericEntry(MenuUiEntry):
    """Any other type; handled like a model group"""


@dataclass
class MenuUiDocument:
    """Top-level menuUI document"""
    menu_ui: List[MenuUiEntry] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'MenuUiDocument':
        """Build from already validated JSON data (see MenuUiParser)"""
        return cls(menu_ui=[MenuUiEntry.from_dict(item) for item in data.get("menuUI", [])])

    def labels(self) -> List[str]:
        return [entry.label for entry in self.menu_ui]

    def __len__(self) -> int:
        return len(self.menu_ui)


@dataclass
class ProductVariant:
    """One Shopify variant row"""
    option_name: str
    option_value: Optional[str]
    icon: Optional[str] = None
    id: Optional[str] = None


@dataclass
class Product:
    """
    Shopify product derived from a single menu entry.

    Always holds at least one variant; entries with nothing to offer get
    the synthetic "Title / Default Title" variant.
    """
    handle: str
    title: str
    label: str
    type: str
    variants: List[ProductVariant] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.variants)

    def __str__(self) -> str:
        return f"Product(handle={self.handle}, title={self.title}, variants={len(self.variants)})"


@dataclass
class ConversionStats:
    """Statistics for one conversion run"""
    start_time: str = ""
    end_time: str = ""
    processing_time_sec: float = 0.0

    # Input stats
    menu_entries: int = 0

    # Product stats
    total_products: int = 0
    total_variants: int = 0
    default_variants: int = 0
    total_images: int = 0

    # Output stats
    csv_rows_generated: int = 0
    output_file: str = ""

    # Errors
    errors: List[str] = field(default_factory=list)

    def add_error(self, error: str):
        """Add error message"""
        self.errors.append(error)

    def print_report(self):
        """Print final statistics report"""
        print("\n" + "=" * 80)
        print("CONVERSION COMPLETE")
        print("=" * 80)
        print(f"\n📊 STATISTICS:")
        print(f"  Menu entries read:       {self.menu_entries}")
        print(f"  Products created:        {self.total_products}")
        print(f"  Total variants:          {self.total_variants}")
        print(f"  Default variants added:  {self.default_variants}")
        print(f"  Images assigned:         {self.total_images}")
        print(f"  Shopify CSV rows:        {self.csv_rows_generated}")
        if self.output_file:
            print(f"  Output file:             {self.output_file}")
        print(f"  Processing time:         {self.processing_time_sec:.2f}s")

        if self.errors:
            print(f"\n⚠️  ERRORS ({len(self.errors)}):")
            for error in self.errors[:10]:
                print(f"  - {error}")
            if len(self.errors) > 10:
                print(f"  ... and {len(self.errors) - 10} more")

        print("\n" + "=" * 80)
