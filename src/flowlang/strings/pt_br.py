STRINGS = {
    # Runtime errors
    "runtime.unsupported_operation": "Operação '{op}' não suportada entre os tipos '{left}' e '{right}'.",
    "runtime.unsupported_unary": "Operação '{op}' não suportada para o tipo '{type}'.",
    "runtime.division_by_zero": "Não é possível dividir por 0",
    "runtime.not_defined": "'{name}' não foi definido.",
    "runtime.did_you_mean": "Você quis dizer '{suggestion}'?",
    "runtime.interpolation": "A variável '{placeholder}' não foi substituída antes da avaliação",
    "runtime.too_many_arguments": "Argumentos demais. Esperava '{expected}' mas recebeu '{got}'",
    "runtime.missing_parameter": "O parâmetro {names} é obrigatório, mas não foi definido na chamada da sua função.",
    "runtime.missing_parameters": "Os parâmetros {names} são obrigatórios, mas não foram definidos na chamada da sua função.",
    "runtime.unknown_parameter": "'{name}' não é um parâmetro de '{function}'.",
    "runtime.repeated_parameter": "'{name}' foi informado mais de uma vez na chamada de '{function}'.",
    "runtime.stack_overflow": "A pilha está cheia, ela tem mais de {size} chamadas",
    "runtime.not_callable": "Objetos do tipo '{type}' não podem ser chamados.",
    "runtime.no_attribute": "Objetos do tipo '{type}' não possuem o atributo '{name}'.",
    "runtime.no_method": "O módulo '{module}' não possui o método '{name}'.",
    "runtime.not_subscriptable": "Objetos do tipo '{type}' não podem ser indexados.",
    "runtime.index_out_of_range": "O índice {index} está fora do intervalo.",
    "runtime.invalid_index": "Índices devem ser inteiros, recebeu '{type}'.",
    "runtime.key_not_found": "A chave {key} não existe.",
    "runtime.unhashable": "O tipo '{type}' não pode ser usado como chave de um dicionário.",
    "runtime.invalid_assignment": "Não é possível atribuir um valor a essa expressão.",
    "runtime.builtin_failure": "{module}.{method} falhou: {reason}",
    "runtime.http_failure": "Não foi possível acessar '{url}': {reason}",
    "runtime.invalid_argument": "'{parameter}' deveria ser {expected}.",
    "runtime.invalid_datetime": "'{text}' não é uma data válida.",
    "runtime.invalid_number": "'{text}' não é um número válido.",
    "runtime.number_overflow": "'{text}' é grande demais para ser representado.",
    "runtime.range_step": "'{parameter}' deve ser diferente de 0.",
    "runtime.raised": "Um erro foi lançado.",
    "runtime.incomplete": "Expressão incompleta, era esperado {expected}.",
    # Expected argument kinds
    "type.string": "um texto",
    "type.integer": "um número inteiro",
    "type.number": "um número",
    "type.list": "uma lista",
    "type.dict": "um dicionário",
    "type.function": "uma função",
    "type.datetime": "uma data",
    "type.error": "um erro",
    "type.list_or_dict": "uma lista ou um dicionário",
    # Snippets
    "snippet.if.label": "se",
    "snippet.if.description": "Executa um bloco apenas quando a condição é Verdadeiro.",
    "snippet.if_else.label": "se/senão",
    "snippet.if_else.description": "Executa um bloco quando a condição é Verdadeiro e outro caso contrário.",
    "snippet.function.label": "função",
    "snippet.function.description": "Define uma função reutilizável.",
    "snippet.lambda.label": "lambda",
    "snippet.lambda.description": "Define uma função em uma única linha.",
    "snippet.try.label": "tentar",
    "snippet.try.description": "Executa um bloco e trata os erros lançados por ele.",
    "snippet.return.description": "Sai da função atual com um valor.",
    "snippet.raise.description": "Lança um erro.",
    "snippet.true.description": "O valor booleano Verdadeiro.",
    "snippet.false.description": "O valor booleano Falso.",
    "snippet.null.description": "Representa a ausência de um valor.",
    "snippet.condition": "condição",
    "snippet.when_true": "quando verdadeiro",
    "snippet.when_false": "quando falso",
    "snippet.name": "nome",
    "snippet.parameters": "parâmetros",
    "snippet.body": "fazer",
    "snippet.error": "erro",
    # Documentation headers
    "documentation.header": "DOCUMENTAÇÃO",
    "documentation.examples_header": "EXEMPLOS",
    # HTTP
    "http.name": "HTTP",
    "http.description": "Para fazer chamadas de API e ser capaz de conectar com outros serviços e sistemas legados",
    "http.get.description": "Isso irá pegar os dados de uma URL, geralmente uma api, e irá retorná-los em formato JSON",
    "http.get.example": (
        "resposta = HTTP.get('https://pokeapi.co/api/v2/pokemon/pikachu')\n"
        "dados_do_pikachu = resposta.json\n"
        "dados_do_pikachu['types'][0]['type']['name']\n\n"
        "# Com isso nós puxamos o dado do pokemon pikachu, recebemos a resposta\n"
        "# em formato json e navegamos pela estrutura dos dados até\n"
        "# pegarmos o que desejamos, que é o tipo do pokemon."
    ),
    "http.post.description": (
        "Isso irá enviar dados para uma URL, geralmente uma api, e irá retorná-los "
        "em formato JSON caso a API retorne algum dado"
    ),
    "http.post.example": "HTTP.post('https://example.com/api/usuarios'; dados_json={'nome': 'Ada'})",
    "http.put.description": "Substitui um recurso de uma URL pelos dados enviados.",
    "http.put.example": "HTTP.put('https://example.com/api/usuarios/1'; dados_json={'nome': 'Ada'})",
    "http.delete.description": "Remove um recurso de uma URL.",
    "http.delete.example": "HTTP.delete('https://example.com/api/usuarios/1')",
    "http.request.description": "Faz uma requisição com qualquer método HTTP.",
    "http.request.example": "HTTP.request('PATCH'; 'https://example.com/api/usuarios/1'; dados_json={'nome': 'Ada'})",
    "http.param.url.name": "endereço",
    "http.param.url.description": (
        "O endereço para puxar/enviar/deletar ou atualizar um recurso de um serviço terceiro. "
        "Será sempre uma URL."
    ),
    "http.param.headers.name": "cabeçalhos",
    "http.param.headers.description": (
        "Um dicionário, com ele você poderá definir os `Cabeçalhos` em suas requisições. "
        "Essa é uma feature avançada.\nReferência: https://developer.mozilla.org/pt-BR/docs/Web/HTTP/Headers"
    ),
    "http.param.basic_auth.name": "autenticação_básica",
    "http.param.basic_auth.description": (
        "Em alguns momentos você irá precisar se autenticar ao realizar uma chamada de API. "
        "Um dos jeitos mais comuns de se autenticar em uma API é com autenticação básica."
    ),
    "http.param.parameters.name": "parâmetros",
    "http.param.parameters.description": (
        "Os parâmetros da requisição. Geralmente são variáveis que você coloca no endereço "
        "da requisição, como ?q=pokemon&pagina=2."
    ),
    "http.param.data.name": "dados",
    "http.param.data.description": (
        "Os dados que você quer enviar para o serviço terceiro. Esses dados serão form-encoded. "
        "Geralmente, você vai querer usar o parâmetro dados_json ao invés desse."
    ),
    "http.param.json_data.name": "dados_json",
    "http.param.json_data.description": (
        "Os dados que você quer enviar para o serviço terceiro. Diferentemente de `dados`, "
        "esses dados são enviados em formato json."
    ),
    "http.param.method.name": "método",
    "http.param.method.description": "O método HTTP, como GET, POST ou PATCH.",
    # Formula fields
    "formula.variable.description": (
        "Esta é uma váriavel. Uma variável refere-se a um dos campos do seu formulário. "
        "O valor de uma variável é definida pelo valor no campo."
    ),
}
