from starlette.datastructures import FormData

from ims.api.intake import form_to_dict


def test_form_blank_values_become_none():
    form = FormData([("name", "Regulator"), ("description", ""), ("initial_likelihood", "4")])
    assert form_to_dict(form) == {"name": "Regulator", "description": None, "initial_likelihood": "4"}


def test_form_list_fields_and_repeated_keys():
    form = FormData([("procedures", "A"), ("manuals", "M1"), ("manuals", "M2"), ("title", "Audit")])
    payload = form_to_dict(form, list_fields=("procedures", "registers"))
    assert payload["procedures"] == ["A"]
    assert payload["manuals"] == ["M1", "M2"]
    assert payload["title"] == "Audit"
    assert "registers" not in payload
