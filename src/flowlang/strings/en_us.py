STRINGS = {
    # Runtime errors
    "runtime.unsupported_operation": "Unsupported operation '{op}' between types '{left}' and '{right}'.",
    "runtime.unsupported_unary": "Unsupported operation '{op}' for type '{type}'.",
    "runtime.division_by_zero": "Cannot divide by 0",
    "runtime.not_defined": "'{name}' was not defined.",
    "runtime.did_you_mean": "Did you mean '{suggestion}'?",
    "runtime.interpolation": "Variable '{placeholder}' was not substituted before evaluation",
    "runtime.too_many_arguments": "Too many arguments provided. Expected '{expected}' but got '{got}'",
    "runtime.missing_parameter": "Parameter {names} is obligatory, but it was not defined in your function call.",
    "runtime.missing_parameters": "Parameters {names} are obligatory, but they were not defined in your function call.",
    "runtime.unknown_parameter": "'{name}' is not a parameter of '{function}'.",
    "runtime.repeated_parameter": "'{name}' was given more than once in the call to '{function}'.",
    "runtime.stack_overflow": "Stack is full, it has more than {size} calls",
    "runtime.not_callable": "'{type}' object is not callable.",
    "runtime.no_attribute": "'{type}' object has no attribute '{name}'.",
    "runtime.no_method": "Module '{module}' has no method '{name}'.",
    "runtime.not_subscriptable": "'{type}' object is not subscriptable.",
    "runtime.index_out_of_range": "Index {index} is out of range.",
    "runtime.invalid_index": "Indexes should be integers, got '{type}'.",
    "runtime.key_not_found": "Key {key} does not exist.",
    "runtime.unhashable": "Type '{type}' cannot be used as a dictionary key.",
    "runtime.invalid_assignment": "Cannot assign a value to this expression.",
    "runtime.builtin_failure": "{module}.{method} failed: {reason}",
    "runtime.http_failure": "Could not reach '{url}': {reason}",
    "runtime.invalid_argument": "'{parameter}' should be {expected}.",
    "runtime.invalid_datetime": "'{text}' is not a valid datetime.",
    "runtime.invalid_number": "'{text}' is not a valid number.",
    "runtime.number_overflow": "'{text}' is too large to be represented.",
    "runtime.range_step": "'{parameter}' must be different than 0.",
    "runtime.raised": "An error was raised.",
    "runtime.incomplete": "Incomplete expression, expected {expected}.",
    # Expected argument kinds
    "type.string": "a string",
    "type.integer": "an integer",
    "type.number": "a number",
    "type.list": "a list",
    "type.dict": "a dict",
    "type.function": "a function",
    "type.datetime": "a datetime",
    "type.error": "an error",
    "type.list_or_dict": "a list or a dict",
    # Snippets
    "snippet.if.label": "if",
    "snippet.if.description": "Runs a block only when the condition is True.",
    "snippet.if_else.label": "if/else",
    "snippet.if_else.description": "Runs one block when the condition is True and another one otherwise.",
    "snippet.function.label": "function",
    "snippet.function.description": "Defines a reusable function.",
    "snippet.lambda.label": "lambda",
    "snippet.lambda.description": "Defines a function in a single line.",
    "snippet.try.label": "try",
    "snippet.try.description": "Runs a block and handles the errors it raises.",
    "snippet.return.description": "Leaves the current function with a value.",
    "snippet.raise.description": "Raises an error.",
    "snippet.true.description": "The boolean True value.",
    "snippet.false.description": "The boolean False value.",
    "snippet.null.description": "Represents the absence of a value.",
    "snippet.condition": "condition",
    "snippet.when_true": "when true",
    "snippet.when_false": "when false",
    "snippet.name": "name",
    "snippet.parameters": "parameters",
    "snippet.body": "do something",
    "snippet.error": "error",
    # Documentation headers
    "documentation.header": "DOCUMENTATION",
    "documentation.examples_header": "EXAMPLES",
    # HTTP
    "http.name": "HTTP",
    "http.description": "Makes API calls so you can connect with other services and legacy systems.",
    "http.get.description": "Fetches data from a URL, usually an API, and returns it as JSON.",
    "http.get.example": (
        "response = HTTP.get('https://pokeapi.co/api/v2/pokemon/pikachu')\n"
        "pikachu = response.json\n"
        "pikachu['types'][0]['type']['name']"
    ),
    "http.post.description": "Sends data to a URL, usually an API, and returns the answer as JSON when there is one.",
    "http.post.example": "HTTP.post('https://example.com/api/users', json_data={'name': 'Ada'})",
    "http.put.description": "Replaces a resource on a URL with the data you send.",
    "http.put.example": "HTTP.put('https://example.com/api/users/1', json_data={'name': 'Ada'})",
    "http.delete.description": "Deletes a resource on a URL.",
    "http.delete.example": "HTTP.delete('https://example.com/api/users/1')",
    "http.request.description": "Makes a request with any HTTP method.",
    "http.request.example": "HTTP.request('PATCH', 'https://example.com/api/users/1', json_data={'name': 'Ada'})",
    "http.param.url.name": "url",
    "http.param.url.description": "The address of the resource on the third party service. It is always a URL.",
    "http.param.headers.name": "headers",
    "http.param.headers.description": "A dict with the headers of the request. This is an advanced feature.",
    "http.param.basic_auth.name": "basic_auth",
    "http.param.basic_auth.description": "A dict with 'username' and 'password' keys used to authenticate with HTTP basic authentication.",
    "http.param.parameters.name": "parameters",
    "http.param.parameters.description": "A dict with the query parameters appended to the url, like ?q=pokemon&page=2.",
    "http.param.data.name": "data",
    "http.param.data.description": "Form encoded data sent to the service. Usually you want json_data instead.",
    "http.param.json_data.name": "json_data",
    "http.param.json_data.description": "Data sent to the service as JSON.",
    "http.param.method.name": "method",
    "http.param.method.description": "The HTTP method, like GET, POST or PATCH.",
    # List
    "list.description": "Helpers to create and transform lists.",
    "list.is_list.description": "Returns True when the value is a list.",
    "list.is_list.example": "List.is_list([1, 2, 3])",
    "list.create_range.description": "Creates a list of integers from start up to, but not including, end.",
    "list.create_range.example": "List.create_range(0, 10, 2)",
    "list.length.description": "Returns the number of elements of a list.",
    "list.length.example": "List.length([1, 2, 3])",
    "list.append.description": "Adds a value to the end of the list and returns the list.",
    "list.append.example": "numbers = [1, 2]\nList.append(numbers, 3)",
    "list.filter.description": "Keeps only the elements for which the function returns True.",
    "list.filter.example": "List.filter([1, 2, 3, 4], function (number): number % 2 == 0)",
    "list.for_each.description": "Calls the function for every element of the list.",
    "list.for_each.example": "List.for_each(['a', 'b'], function (letter): HTTP.post('https://example.com', json_data={'letter': letter}))",
    "list.map.description": "Returns a new list with the result of the function for every element.",
    "list.map.example": "List.map([1, 2, 3], function (number): number * 2)",
    "list.join.description": "Joins the elements of the list in a single string.",
    "list.join.example": "List.join(['a', 'b', 'c'], ', ')",
    "list.param.element.description": "Any value.",
    "list.param.list.description": "The list to work with.",
    "list.param.start.description": "The first number of the range.",
    "list.param.end.description": "The range stops before this number.",
    "list.param.steps.description": "How much is added on every step. Can be negative.",
    "list.param.value.description": "The value to add.",
    "list.param.function.description": "A function receiving each element.",
    "list.param.separator.description": "The text placed between the elements.",
    # Dict
    "dict.description": "Helpers to inspect and change dicts.",
    "dict.is_dict.description": "Returns True when the value is a dict.",
    "dict.is_dict.example": "Dict.is_dict({'a': 1})",
    "dict.length.description": "Returns the number of keys of a dict.",
    "dict.length.example": "Dict.length({'a': 1, 'b': 2})",
    "dict.keys.description": "Returns a list with the keys of the dict.",
    "dict.keys.example": "Dict.keys({'a': 1, 'b': 2})",
    "dict.values.description": "Returns a list with the values of the dict.",
    "dict.values.example": "Dict.values({'a': 1, 'b': 2})",
    "dict.items.description": "Returns a list of [key, value] pairs.",
    "dict.items.example": "Dict.items({'a': 1, 'b': 2})",
    "dict.delete.description": "Removes a key from the dict and returns the dict.",
    "dict.delete.example": "Dict.delete({'a': 1, 'b': 2}, 'a')",
    "dict.param.element.description": "Any value.",
    "dict.param.dict.description": "The dict to work with.",
    "dict.param.key.description": "The key to remove.",
    # String
    "string.description": "Helpers to work with text.",
    "string.is_string.description": "Returns True when the value is a string.",
    "string.is_string.example": "String.is_string('hello')",
    "string.to_string.description": "Converts any value to its text representation.",
    "string.to_string.example": "String.to_string(10)",
    "string.length.description": "Returns the number of characters of the string.",
    "string.length.example": "String.length('hello')",
    "string.extract.description": "Extracts a number of characters starting at a position.",
    "string.extract.example": "String.extract('hello', 1, 3)",
    "string.slice.description": "Returns the part of the string between start and end.",
    "string.slice.example": "String.slice('hello', 0, 4)",
    "string.format.description": "Replaces {key} with values from a dict, or each {} with values from a list.",
    "string.format.example": "String.format('Hello {name}', {'name': 'Ada'})",
    "string.split.description": "Splits the string on every separator.",
    "string.split.example": "String.split('a,b,c', ',')",
    "string.upper.description": "Returns the string in upper case.",
    "string.upper.example": "String.upper('hello')",
    "string.lower.description": "Returns the string in lower case.",
    "string.lower.example": "String.lower('HELLO')",
    "string.param.element.description": "Any value.",
    "string.param.string.description": "The text to work with.",
    "string.param.first_character.description": "Position of the first extracted character.",
    "string.param.number_of_characters.description": "How many characters to extract.",
    "string.param.start.description": "Position where the slice starts.",
    "string.param.end.description": "Position where the slice stops.",
    "string.param.variables.description": "A dict or a list with the values to place in the string.",
    "string.param.separator.description": "The text that separates the parts. When empty, splits every character.",
    # Boolean
    "boolean.description": "Helpers for True and False values.",
    "boolean.is_boolean.description": "Returns True when the value is a boolean.",
    "boolean.is_boolean.example": "Boolean.is_boolean(True)",
    "boolean.param.element.description": "Any value.",
    # Integer
    "integer.description": "Helpers for whole numbers.",
    "integer.is_integer.description": "Returns True when the value is an integer.",
    "integer.is_integer.example": "Integer.is_integer(10)",
    "integer.from_string.description": "Converts a text to an integer.",
    "integer.from_string.example": "Integer.from_string('10')",
    "integer.to_string.description": "Converts an integer to text.",
    "integer.to_string.example": "Integer.to_string(10)",
    "integer.param.element.description": "Any value.",
    "integer.param.string.description": "The text holding the number.",
    "integer.param.number.description": "The number to convert.",
    # Float
    "float.description": "Helpers for decimal numbers.",
    "float.is_float.description": "Returns True when the value is a float.",
    "float.is_float.example": "Float.is_float(1.5)",
    "float.from_string.description": "Converts a text to a float.",
    "float.from_string.example": "Float.from_string('1.5')",
    "float.to_string.description": "Converts a float to text.",
    "float.to_string.example": "Float.to_string(1.5)",
    "float.ceil.description": "Rounds the number up.",
    "float.ceil.example": "Float.ceil(1.2)",
    "float.floor.description": "Rounds the number down.",
    "float.floor.example": "Float.floor(1.8)",
    "float.round.description": "Rounds the number to a number of decimal places.",
    "float.round.example": "Float.round(1.2345, 2)",
    "float.param.element.description": "Any value.",
    "float.param.string.description": "The text holding the number.",
    "float.param.number.description": "The number to work with.",
    "float.param.decimal_places.description": "How many decimal places to keep.",
    # Number
    "number.description": "Helpers for any kind of number.",
    "number.is_number.description": "Returns True when the value is an integer or a float.",
    "number.is_number.example": "Number.is_number(10)",
    "number.round.description": "Rounds the number to a number of decimal places.",
    "number.round.example": "Number.round(10.456, 1)",
    "number.to_string.description": "Converts a number to text.",
    "number.to_string.example": "Number.to_string(10)",
    "number.param.element.description": "Any value.",
    "number.param.number.description": "The number to work with.",
    "number.param.decimal_places.description": "How many decimal places to keep.",
    # Error
    "error.description": "Create and inspect errors.",
    "error.is_error.description": "Returns True when the value is an error.",
    "error.is_error.example": "Error.is_error(Error.new('ValueError', 'Invalid value'))",
    "error.new.description": "Creates a new error that can be raised.",
    "error.new.example": "raise Error.new('ValueError', 'Invalid value')",
    "error.type.description": "Returns the type of the error.",
    "error.type.example": "try do\n    1 / 0\notherwise (error) do\n    Error.type(error)\nend",
    "error.message.description": "Returns the message of the error.",
    "error.message.example": "try do\n    1 / 0\notherwise (error) do\n    Error.message(error)\nend",
    "error.param.element.description": "Any value.",
    "error.param.type.description": "The type of the error, like ValueError.",
    "error.param.message.description": "A message explaining what went wrong.",
    "error.param.error.description": "The error to inspect.",
    # Function
    "function.description": "Inspect and change functions.",
    "function.is_function.description": "Returns True when the value is a function.",
    "function.is_function.example": "Function.is_function(function (x): x)",
    "function.name.description": "Returns the name of the function.",
    "function.name.example": "function sum(a, b): a + b\nFunction.name(sum)",
    "function.parameters.description": "Returns the list of parameter names of the function.",
    "function.parameters.example": "function sum(a, b): a + b\nFunction.parameters(sum)",
    "function.rename.description": "Gives the function a new name.",
    "function.rename.example": "Function.rename(function (x): x, 'identity')",
    "function.param.element.description": "Any value.",
    "function.param.function.description": "The function to work with.",
    "function.param.name.description": "The new name.",
    # Datetime
    "datetime.description": "Create, read and calculate dates and times.",
    "datetime.is_datetime.description": "Returns True when the value is a datetime.",
    "datetime.is_datetime.example": "Datetime.is_datetime(Datetime.now())",
    "datetime.now.description": "Returns the current date and time.",
    "datetime.now.example": "Datetime.now()",
    "datetime.new.description": "Creates a new datetime.",
    "datetime.new.example": "Datetime.new(2022, 1, 31)",
    "datetime.year.description": "Returns the year of the datetime.",
    "datetime.year.example": "Datetime.year(~D[2022-01-31])",
    "datetime.month.description": "Returns the month of the datetime.",
    "datetime.month.example": "Datetime.month(~D[2022-01-31])",
    "datetime.day.description": "Returns the day of the datetime.",
    "datetime.day.example": "Datetime.day(~D[2022-01-31])",
    "datetime.hour.description": "Returns the hour of the datetime.",
    "datetime.hour.example": "Datetime.hour(~D[2022-01-31 10:30:00])",
    "datetime.minute.description": "Returns the minute of the datetime.",
    "datetime.minute.example": "Datetime.minute(~D[2022-01-31 10:30:00])",
    "datetime.second.description": "Returns the second of the datetime.",
    "datetime.second.example": "Datetime.second(~D[2022-01-31 10:30:15])",
    "datetime.microsecond.description": "Returns the microsecond of the datetime.",
    "datetime.microsecond.example": "Datetime.microsecond(Datetime.now())",
    "datetime.to_iso_string.description": "Converts the datetime to an ISO 8601 string.",
    "datetime.to_iso_string.example": "Datetime.to_iso_string(~D[2022-01-31])",
    "datetime.from_iso_string.description": "Creates a datetime from an ISO 8601 string.",
    "datetime.from_iso_string.example": "Datetime.from_iso_string('2022-01-31T10:30:00+00:00')",
    "datetime.add.description": "Adds an amount of time to the datetime. Use negative numbers to subtract.",
    "datetime.add.example": "Datetime.add(~D[2022-01-31], months=1, days=2)",
    "datetime.difference.description": "Returns the difference between two datetimes.",
    "datetime.difference.example": "Datetime.difference(~D[2022-02-01], ~D[2022-01-01]).days",
    "datetime.param.element.description": "Any value.",
    "datetime.param.datetime.description": "The datetime to work with.",
    "datetime.param.string.description": "An ISO 8601 formatted string.",
    "datetime.param.year.description": "The year.",
    "datetime.param.month.description": "The month, from 1 to 12.",
    "datetime.param.day.description": "The day of the month.",
    "datetime.param.hour.description": "The hour, from 0 to 23.",
    "datetime.param.minute.description": "The minute.",
    "datetime.param.second.description": "The second.",
    "datetime.param.microsecond.description": "The microsecond.",
    "datetime.param.years.description": "Years to add.",
    "datetime.param.months.description": "Months to add.",
    "datetime.param.days.description": "Days to add.",
    "datetime.param.hours.description": "Hours to add.",
    "datetime.param.minutes.description": "Minutes to add.",
    "datetime.param.seconds.description": "Seconds to add.",
    "datetime.param.bigger_date.description": "The most recent datetime.",
    "datetime.param.smaller_date.description": "The oldest datetime.",
    # Formula fields
    "formula.variable.description": (
        "This is a variable. A variable refers to one of the fields of your form. "
        "Its value is the value of the field."
    ),
}
