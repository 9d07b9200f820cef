class MathError(Exception):
    def __init__(self, message, code="9999", equation=None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.equation = equation

class SyntaxError(MathError):
    pass

class SymbolError(SyntaxError):
    pass

class CalculationError(MathError):
    pass



Error_Dictionary = {

    "3" : "Calculator Error",
    "4" : "UI Error",
    "5" : "Configuration Error",
    "9" : "Runtime Error"

}

#Error Messages are structured in:
# 1. Digit: Main Error
# 2. Digit: Specification
# 3. and 4. Digit: Error Number



ERROR_MESSAGES = {
    "3003" : "Division by Zero",
    "3011" : "Unexpected Token: ", # + Token
    "3012" : "Unknown constant: ", # + Symbol
    "3013" : "Unknown function: ", # + Symbol
    "3026" : "Number too big.",
    "3027" : "Invalid operation: ", # + Operation
    "3028" : "Wrong number of arguments: ", # + Function
    "3100" : "No calculable formula found.",


    "4002" : "Calculation already Running!",
    "4501" : "Not all Settings could be saved: ", # + Error raising setting
    "4502" : "Invalid setting value: ", # + Setting


    "9999" : "Unexpected Error: " #+error
}
