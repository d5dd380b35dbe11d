from flowlang.autocomplete import Autocompleter, build_snippets
from flowlang.config import FlowConfig
from flowlang.formula import FormulaAutocomplete, FormularyField
from flowlang.library import LibraryModule, method
from flowlang.service import FlowService


class StubHTTP(LibraryModule):
    module_name = "HTTP"
    doc_prefix = "http"

    @method(url="string", headers="dict")
    def get(self, url, headers=None):
        return None


def test_cursor_inside_call_describes_current_parameter():
    service = FlowService.create("en-US", FlowConfig(), modules=[StubHTTP])
    source = "HTTP.get('https://x.com', |)"
    cursor = source.index("|")
    completion = service.autocompleter().complete(source.replace("|", ""), cursor)

    assert completion.cursor.call.attribute_name == "HTTP"
    assert completion.cursor.call.method_name == "get"
    assert completion.cursor.call.parameter_index == 1
    assert completion.call.method.name == "get"
    assert completion.call.parameter.name == "headers"
    assert completion.call.parameter.required is False
    assert completion.call.parameter.description == "A dict with the headers of the request. This is an advanced feature."


def test_typed_prefix_is_not_duplicated(service):
    completion = service.autocompleter().complete("HT")
    assert [option.label for option in completion.options] == ["HTTP"]
    option = completion.options[0]
    assert option.type == "module"
    assert option.autocomplete_text == "TP"
    assert option.label[:2] + option.autocomplete_text == "HTTP"


def test_keyword_argument_selects_parameter_by_name(service):
    completion = service.autocompleter().complete("HTTP.get('https://x.com', headers=")
    assert completion.call.parameter.name == "headers"
    assert completion.call.parameter_index == 1


def test_methods_of_a_module(service):
    completion = service.autocompleter().complete("List.")
    labels = [option.label for option in completion.options]
    assert labels == ["is_list", "create_range", "length", "append", "filter", "for_each", "map", "join"]
    map_option = completion.options[labels.index("map")]
    assert map_option.type == "function"
    assert map_option.autocomplete_text == "map()"
    assert map_option.cursor_offset == 1
    assert map_option.examples == ["List.map([1, 2, 3], function (number): number * 2)"]
    assert [p["name"] for p in map_option.parameters] == ["list", "function"]
    assert map_option.description.startswith("# DOCUMENTATION")


def test_method_prefix_filter(service):
    completion = service.autocompleter().complete("x = List.ma")
    assert [(o.label, o.autocomplete_text) for o in completion.options] == [("map", "p()")]


def test_separator_means_no_filter(service):
    completer = service.autocompleter()
    assert len(completer.options(".", "List")) == 8
    assert len(completer.options(",", "List")) == 8


def test_top_level_filter_includes_snippets(service):
    labels = [option.label for option in service.autocompleter().options("i")]
    assert labels == ["if", "if/else"]
    snippet = service.autocompleter().options("if")[0]
    assert snippet.is_snippet
    assert snippet.type == "language"
    assert snippet.autocomplete_text == " condition do\n    when true\nend"
    assert snippet.cursor_offset == len("\nend")


def test_snippet_with_a_different_text_is_substituted(service):
    option = service.autocompleter().options("la", element_at=7)[0]
    assert option.label == "lambda"
    assert option.autocomplete_text.startswith("function ")
    assert option.to_substitute == {"from": 7, "to": 9}


def test_options_are_fresh_on_every_call(service):
    completer = service.autocompleter()
    first = completer.options("", "List")
    first[0].autocomplete_text = "mutated"
    first[0].parameters[0]["name"] = "mutated"
    first[0].examples.append("mutated")
    second = completer.options("", "List")
    assert second[0].autocomplete_text == "is_list()"
    assert second[0].parameters[0]["name"] == "element"
    assert "mutated" not in second[0].examples
    assert first[0] is not second[0]


def test_repeated_lookups_are_equal(service):
    completer = service.autocompleter()
    assert [o.to_dict() for o in completer.options("HT")] == [o.to_dict() for o in completer.options("HT")]


def test_unknown_module_has_no_methods(service):
    assert service.autocompleter().options("", "Nope") == []


def test_custom_options_for_formula_variables(service):
    fields = [FormularyField("1", "Name"), FormularyField("2", "Number"), FormularyField("3", "Age")]
    completer = Autocompleter(service.registry, service.context, custom_options=FormulaAutocomplete(fields))
    completion = completer.complete("{{Na")
    assert [option.label for option in completion.options] == ["{{Name}}"]
    option = completion.options[0]
    assert option.type == "custom"
    assert option.to_substitute == {"from": 0, "to": 4}
    assert option.to_dict()["toSubstitute"] == {"from": 0, "to": 4}


def test_completion_to_dict(service):
    data = service.autocompleter().complete("HTTP.get(").to_dict()
    assert data["status"] == "incomplete"
    assert data["call"]["module"] == "HTTP"
    assert data["call"]["parameter"]["name"] == "url"
    assert data["call"]["parameterIndex"] == 0
    assert "toSubstitute" not in data["options"][0]
    assert set(data["options"][0]) == {
        "label",
        "autocompleteText",
        "description",
        "type",
        "rawName",
        "examples",
        "parameters",
        "cursorOffset",
        "isSnippet",
    }


def test_pt_br_snippets_use_localized_keywords(pt_context):
    snippets = {option.raw_name: option for option in build_snippets(pt_context)}
    assert snippets["if"].autocomplete_text.startswith("se ")
    assert snippets["if"].autocomplete_text.endswith("\nfim")
    assert snippets["True"].label == "Verdadeiro"
    assert snippets["try"].autocomplete_text.startswith("tentar faça")
    assert "caso contrário" in snippets["try"].autocomplete_text


def test_pt_br_autocomplete_lists_documented_modules_only(pt_service):
    labels = [option.label for option in pt_service.autocompleter().options("")]
    assert "HTTP" in labels
    assert "List" not in labels
    assert "Verdadeiro" in labels
