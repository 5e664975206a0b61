from src.models import MenuUiDocument, MenuUiEntry, MaterialEntry, ModelEntry, GenericEntry, OptionsConfig
from src.products import ProductBuilder


def _entry(data):
    return MenuUiEntry.from_dict(data)


class TestCreateHandle:
    def test_prefixes_configured_handle(self, options):
        assert ProductBuilder(options).create_handle("Variant Change!") == "custom-product-variant-change"

    def test_without_prefix(self):
        assert ProductBuilder().create_handle("Variant Change!") == "variant-change"

    def test_collapses_whitespace_and_hyphens(self):
        builder = ProductBuilder()
        assert builder.create_handle("  Leg -- Type  ") == "leg-type"
        assert builder.create_handle("-Top---Finish-") == "top-finish"

    def test_blank_label_uses_prefix_alone(self, options):
        assert ProductBuilder(options).create_handle("   ") == "custom-product"

    def test_blank_label_without_prefix_falls_back(self):
        builder = ProductBuilder()
        assert builder.create_handle("   ") == "product"
        assert builder.create_handle("!!!") == "product"

    def test_is_idempotent(self):
        builder = ProductBuilder()
        handle = builder.create_handle("Seat Height (cm)")
        assert handle == "seat-height-cm"
        assert builder.create_handle(handle) == handle


class TestCreateOptionName:
    def test_title_cases_words(self):
        assert ProductBuilder().create_option_name("handle change") == "Handle Change"

    def test_strips_punctuation_and_extra_spaces(self):
        assert ProductBuilder().create_option_name("  variant   change! ") == "Variant Change"

    def test_keeps_digits(self):
        assert ProductBuilder().create_option_name("LEG 2 style") == "Leg 2 Style"


class TestProductTitle:
    def test_non_primary_gets_suffix(self, options):
        entry = _entry({"label": "Handle Change", "type": "model", "options": []})
        assert ProductBuilder(options).product_title(entry) == "Custom Product - Handle Change"

    def test_primary_keeps_base_title(self, options):
        options.primary_product = "Handle Change"
        entry = _entry({"label": "Handle Change", "type": "model", "options": []})
        assert ProductBuilder(options).product_title(entry) == "Custom Product"

    def test_primary_without_title_uses_label(self):
        builder = ProductBuilder(OptionsConfig(primary_product="Handle Change"))
        entry = _entry({"label": "Handle Change", "type": "model", "options": []})
        assert builder.product_title(entry) == "Handle Change"

    def test_no_title_uses_label(self):
        entry = _entry({"label": "Leg Style", "type": "model", "options": []})
        assert ProductBuilder().product_title(entry) == "Leg Style"


class TestEntryTypes:
    def test_type_selects_entry_shape(self):
        assert isinstance(_entry({"label": "a", "type": "material", "options": []}), MaterialEntry)
        assert isinstance(_entry({"label": "a", "type": "material change", "options": []}), MaterialEntry)
        assert isinstance(_entry({"label": "a", "type": "model", "options": []}), ModelEntry)
        assert isinstance(_entry({"label": "a", "type": "texture", "options": []}), GenericEntry)


class TestExtractVariants:
    def test_material_uses_base_maps_of_first_option(self, sample_data):
        entry = _entry(sample_data["menuUI"][0])
        variants = ProductBuilder().extract_variants(entry)

        assert [v.option_value for v in variants] == ["Amber", "Bitmore"]
        assert all(v.option_name == "Variant Change" for v in variants)
        assert variants[0].icon == "https://example.com/amber.png"
        assert variants[0].id == "72x0ngHaynQRJo2jZzgp"

    def test_material_ignores_later_options(self):
        entry = _entry({
            "label": "Finish",
            "type": "material",
            "options": [
                {"label": "first", "baseMaps": [{"label": "Oak"}]},
                {"label": "second", "baseMaps": [{"label": "Pine"}, {"label": "Elm"}]},
            ],
        })
        variants = ProductBuilder().extract_variants(entry)
        assert [v.option_value for v in variants] == ["Oak"]

    def test_material_without_base_maps_gets_default(self):
        entry = _entry({"label": "Finish", "type": "material", "options": [{"label": "first"}]})
        variants = ProductBuilder().extract_variants(entry)
        assert len(variants) == 1
        assert variants[0].option_name == "Title"
        assert variants[0].option_value == "Default Title"

    def test_model_uses_option_labels(self, sample_data):
        entry = _entry(sample_data["menuUI"][1])
        variants = ProductBuilder().extract_variants(entry)

        assert [v.option_value for v in variants] == ["handle 1", "handle 2"]
        assert all(v.option_name == "Handle Change" for v in variants)
        assert variants[0].icon is None

    def test_unknown_type_uses_options(self):
        entry = _entry({"label": "Cable Tray", "type": "accessory", "options": [{"label": "Included"}]})
        variants = ProductBuilder().extract_variants(entry)
        assert [(v.option_name, v.option_value) for v in variants] == [("Cable Tray", "Included")]

    def test_empty_options_gets_default_variant(self):
        entry = _entry({"label": "Assembly", "type": "model", "options": []})
        variants = ProductBuilder().extract_variants(entry)
        assert [(v.option_name, v.option_value) for v in variants] == [("Title", "Default Title")]


def test_build_products_keeps_source_order(sample_data, options):
    document = MenuUiDocument.from_dict(sample_data)
    products = ProductBuilder(options).build_products(document)

    assert [p.handle for p in products] == [
        "custom-product-variant-change",
        "custom-product-handle-change",
    ]
    assert [p.title for p in products] == [
        "Custom Product - variant change",
        "Custom Product - Handle Change",
    ]
    assert [p.type for p in products] == ["material", "model"]
    assert [len(p) for p in products] == [2, 2]
