def test_pt_br_keywords_and_numbers(pt_service):
    source = (
        "função média(valores) faça\n"
        "  total = 0\n"
        "  List.for_each(valores; função (v) faça\n"
        "    total = total + v\n"
        "  fim)\n"
        "  retornar total / List.length(valores)\n"
        "fim\n"
        "média([1; 2; 3,5])"
    )
    assert pt_service.evaluate_sync(source).value == 6.5 / 3


def test_pt_br_conditionals(pt_service):
    source = "x = 3\nse x é 3 e não Falso faça\n  'sim'\nsenão faça\n  'não'\nfim"
    assert pt_service.evaluate_sync(source).value == "sim"
    assert pt_service.evaluate_sync("Vazio ou 2").value == 2
    assert pt_service.evaluate_sync("2 em [1; 2]").value is True


def test_pt_br_try_otherwise(pt_service):
    source = "tentar faça\n  lançar 'ValueError': 'ruim'\ncaso contrário (erro) faça\n  erro.message\nfim"
    assert pt_service.evaluate_sync(source).value == "ruim"


def test_pt_br_rendering(pt_service):
    assert pt_service.evaluate_sync("1,5 * 3", representation=True) == "4,5"
    assert pt_service.evaluate_sync("[Verdadeiro; Vazio]", representation=True) == "[Verdadeiro; Vazio]"
    assert pt_service.evaluate_sync("~D[31/01/2024 08:30]", representation=True) == "~D[31/01/2024 08:30:00.000]"


def test_pt_br_error_messages(pt_service):
    assert pt_service.evaluate_sync("1 / 0").message == "Não é possível dividir por 0"
    assert pt_service.evaluate_sync("desconhecido").message.startswith("'desconhecido' não foi definido.")


def test_en_us_source_is_not_pt_br(pt_service):
    result = pt_service.evaluate_sync("if True do\n  1\nend")
    assert result.error_type == "SyntaxError"
