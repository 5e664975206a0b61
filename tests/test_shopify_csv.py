import pytest

from config import SHOPIFY_DEFAULTS
from src.models import MenuUiDocument, OptionsConfig
from src.products import ProductBuilder
from src.shopify_csv import ShopifyCSVGenerator

from conftest import read_csv_rows, read_csv_dicts

COLUMNS = ShopifyCSVGenerator.SHOPIFY_COLUMNS
PRODUCT_FIELDS = ['Title', 'Body (HTML)', 'Vendor', 'Product Category', 'Type', 'Tags', 'Published']


def generate(data, options=None):
    options = options or OptionsConfig()
    products = ProductBuilder(options).build_products(MenuUiDocument.from_dict(data))
    return ShopifyCSVGenerator(options).generate_shopify_csv(products)


def test_schema_has_fixed_column_order():
    assert len(COLUMNS) == 48
    assert len(set(COLUMNS)) == len(COLUMNS)
    assert COLUMNS[0] == 'Handle'
    assert COLUMNS[-1] == 'Status'
    assert COLUMNS.index('Image Src') == 25


def test_header_row_and_row_count(sample_data, options):
    csv_text = generate(sample_data, options)
    rows = read_csv_rows(csv_text)

    assert rows[0] == COLUMNS
    assert len(rows) == 1 + 4
    assert all(len(row) == len(COLUMNS) for row in rows)
    assert not csv_text.endswith('\n')
    assert csv_text.count('\n') == 4


def test_first_row_carries_product_fields(sample_data, options):
    first = read_csv_dicts(generate(sample_data, options))[0]

    assert first['Handle'] == 'custom-product-variant-change'
    assert first['Title'] == 'Custom Product - variant change'
    assert first['Body (HTML)'] == '<p></p>'
    assert first['Vendor'] == "Delta's Integration"
    assert first['Product Category'] == 'Furniture > Office Furniture > Workspace Tables'
    assert first['Type'] == 'material'
    assert first['Tags'] == 'custom-product, variant change'
    assert first['Published'] == 'TRUE'
    assert first['Option1 Name'] == 'Variant Change'
    assert first['Option1 Value'] == 'Amber'
    assert first['Variant SKU'] == 'custom-product-variant-change-1'


def test_later_rows_repeat_only_handle(sample_data, options):
    rows = read_csv_dicts(generate(sample_data, options))
    second = rows[1]

    assert second['Handle'] == 'custom-product-variant-change'
    assert all(second[field] == '' for field in PRODUCT_FIELDS)
    assert second['Option1 Name'] == 'Variant Change'
    assert second['Option1 Value'] == 'Bitmore'
    assert second['Variant SKU'] == 'custom-product-variant-change-2'
    assert rows[2]['Title'] == 'Custom Product - Handle Change'
    assert rows[3]['Published'] == ''


def test_every_row_has_variant_constants(sample_data, options):
    for row in read_csv_dicts(generate(sample_data, options)):
        assert row['Option2 Name'] == row['Option2 Value'] == ''
        assert row['Option3 Name'] == row['Option3 Value'] == ''
        assert row['Variant Grams'] == '0'
        assert row['Variant Inventory Tracker'] == 'shopify'
        assert row['Variant Inventory Qty'] == '10'
        assert row['Variant Inventory Policy'] == 'deny'
        assert row['Variant Fulfillment Service'] == 'manual'
        assert row['Variant Price'] == '3000'
        assert row['Variant Requires Shipping'] == 'TRUE'
        assert row['Variant Taxable'] == 'TRUE'
        assert row['Gift Card'] == 'FALSE'
        assert row['Included / United States'] == 'TRUE'
        assert row['Included / International'] == 'TRUE'
        assert row['Status'] == 'active'
        for column in ('Variant Compare At Price', 'Variant Barcode', 'SEO Title',
                       'Google Shopping / MPN', 'Variant Weight Unit', 'Cost per item'):
            assert row[column] == ''


def test_configured_values_override_defaults(sample_data):
    options = OptionsConfig(vendor='Acme', product_category='Furniture > Desks', base_price='129.99')
    first = read_csv_dicts(generate(sample_data, options))[0]

    assert first['Vendor'] == 'Acme'
    assert first['Product Category'] == 'Furniture > Desks'
    assert first['Variant Price'] == '129.99'
    assert first['Tags'] == 'variant change'
    assert first['Handle'] == 'variant-change'
    assert first['Title'] == 'variant change'


def test_image_only_on_first_row_with_icon(sample_data, options):
    rows = read_csv_dicts(generate(sample_data, options))

    assert rows[0]['Image Src'] == SHOPIFY_DEFAULTS['placeholder_image_url']
    assert rows[0]['Image Position'] == '1'
    assert rows[0]['Image Alt Text'] == 'Custom Product - variant change - Amber'
    # second Amber/Bitmore row has an icon but is not first; model options have no icon
    for row in rows[1:]:
        assert row['Image Src'] == row['Image Position'] == row['Image Alt Text'] == ''


def test_image_position_counts_across_document(mixed_data):
    rows = read_csv_dicts(generate(mixed_data))
    positions = [(r['Handle'], r['Image Position']) for r in rows if r['Image Position']]

    # Leg Style's first option has no icon, so it gets no image even though a later one does
    assert positions == [('top-finish', '1'), ('cable-tray', '2')]


def test_image_position_restarts_per_call(mixed_data):
    generator = ShopifyCSVGenerator()
    products = ProductBuilder().build_products(MenuUiDocument.from_dict(mixed_data))

    first = generator.generate_shopify_csv(products)
    second = generator.generate_shopify_csv(products)

    assert first == second
    assert generator.images_assigned == 2


def test_empty_options_emit_default_title_row(mixed_data):
    rows = read_csv_dicts(generate(mixed_data))
    assembly = [r for r in rows if r['Handle'] == 'assembly']

    assert len(assembly) == 1
    assert assembly[0]['Option1 Name'] == 'Title'
    assert assembly[0]['Option1 Value'] == 'Default Title'
    assert assembly[0]['Title'] == 'Assembly'


@pytest.mark.parametrize('label', ['Oak, "natural"', 'He said "hi"', 'two\nlines', 'a\rb', 'c\r\nd', 'a,b,c'])
def test_special_characters_stay_one_field(label):
    data = {"menuUI": [{"label": "Finish", "type": "model", "options": [{"label": label}]}]}
    csv_text = generate(data)
    rows = read_csv_rows(csv_text)

    assert len(rows) == 2
    assert len(rows[1]) == len(COLUMNS)
    assert rows[1][COLUMNS.index('Option1 Value')] == label


def test_quotes_are_doubled_inside_quoted_field():
    data = {"menuUI": [{"label": "Finish", "type": "model", "options": [{"label": 'Oak, "natural"'}]}]}
    csv_text = generate(data)

    assert ',"Oak, ""natural""",' in csv_text


def test_plain_values_are_not_quoted(sample_data, options):
    data_line = generate(sample_data, options).split('\n')[2]
    assert data_line.startswith('custom-product-variant-change,,,,,,,,Variant Change,Bitmore,')
    assert '"' not in data_line


def test_missing_option_label_writes_empty_field():
    data = {"menuUI": [{"label": "Finish", "type": "model", "options": [{"icon": "https://example.com/x.png"}]}]}
    row = read_csv_dicts(generate(data))[0]

    assert row['Option1 Value'] == ''
    assert row['Image Alt Text'] == 'Finish - '


def test_round_trip_recovers_constants(mixed_data):
    csv_text = generate(mixed_data)
    rows = read_csv_dicts(csv_text)
    expected_rows = 2 + 2 + 1 + 1

    assert len(rows) == expected_rows
    for row in rows:
        assert row['Variant Inventory Tracker'] == 'shopify'
        assert row['Status'] == 'active'
        assert row['Handle']


def test_carriage_return_is_quoted_and_rows_use_newline():
    data = {"menuUI": [{"label": "Finish", "type": "model", "options": [{"label": "a\rb"}, {"label": "plain"}]}]}
    csv_text = generate(data)

    assert ',"a\rb",' in csv_text
    assert '\r\n' not in csv_text
    assert len(csv_text.split('\n')) == 3
    rows = read_csv_dicts(csv_text)
    assert [r['Option1 Value'] for r in rows] == ['a\rb', 'plain']
