class Messages:

    CERT_REMARKS = "Argument combinations remarks:"

    ADDITIONAL_ARGUMENTS_TOO_EARLY = "Additional arguments cannot be accessed before the command line is parsed."
    ADDITIONAL_ARGUMENTS_FORBIDDEN = ("Additional arguments are not accepted (accept_additional_arguments is False)"
                                      " therefore they cannot be read.")
    ADDITIONAL_ARGUMENTS_FOUND = ("Additional arguments found and parser does not accept additional arguments."
                                  " Set accept_additional_arguments to True if you want to accept them.")
    ADDITIONAL_ARGUMENTS_SLOTS = ("If optional or allow_multiple flags are set for additional argument,"
                                  " there can only be one additional argument.")
    NOT_ENOUGH_ADDITIONAL_ARGUMENTS = "Not enough additional arguments. Needed {0} additional arguments."
    NONNEGATIVE = "The value must be non negative."

    ARG_BOUNDED_GREATER_THAN_MAX = "Argument value {0} is greater then maximum value {1}"
    ARG_BOUNDED_LESSER_THAN_MIN = "Argument value {0} is lesser then minimum value {1}"
    ARG_ENUM_OUT_OF_RANGE = "Value {0} is not allowed for argument {1}"
    ARG_ENUM_IGNORE_CASE = "Ignore case can be used only for string arguments, value type is {0}"
    ARG_REGEX_MISMATCH = "Argument '{0}' does not match the regex pattern '{1}'."
    ARG_REGEX_MISMATCH_SAMPLE = ("Argument '{0}' does not match the regex pattern '{1}'."
                                 " An example of a valid value would be '{2}'.")
    ARG_NAME_MISSING = "An argument must have a short name or a long name."
    ARG_NOT_ONE_CHAR = "Short name of an argument must be a single non-whitespace character."
    ARG_NOT_ONE_WORD = "Long name of an argument must be one word."
    ARG_ALIAS_EMPTY = "Alias of an argument must not be empty."
    ARG_UNKNOWN = "Unknown argument found: {0}."
    ARG_DUPLICATE = "Argument name or alias used more than once: {0}"
    ARG_IGNORE_CASE_CLASH = "Clash in ignore case argument names: {0}"
    ARG_VALUE_MISSING = "Value argument {0} must be followed by a value, another argument({1}) found instead"
    ARG_VALUE_MISSING_END = "Value argument {0} must be followed by a value."
    ARG_VALUE_MULTIPLE_OCCURS = "Argument {0} can not be used multiple times."
    ARG_VALUE_SINGLE_ACCESS = "Cannot access value of argument {0} because allow_multiple is True; use values instead."
    ARG_VALUE_MULTIPLE_ACCESS = ("Cannot access values of argument {0} because allow_multiple is False;"
                                 " use value instead.")
    ARG_VALUE_STANDARD_CONVERT_FAILED = ("Failed to convert string {0} to type {1}. Use strings in accepted format"
                                         " or define custom conversion using convert_value_handler.")
    ARG_VALUE_USER_CONVERT_MISSING = ("Type {0} of argument {1} is not a built-in type. Set convert_value_handler"
                                      " to a conversion routine for this type, register one with register_converter,"
                                      " or define a static parse(value) method that can parse your type from string.")
    ARG_MISSING_MANDATORY = "Argument {0} is not marked as optional and was not found on the command line."

    BAD_ARG_IN_GROUP = ("Grouping of multiple short name arguments in one word (e.g. -a -b into -ab) is allowed"
                        " only for switch arguments. Argument {0} is not a switch argument.")
    BINDING = "Binding of the argument {0} to the field {1} of the object {2} failed."
    BINDING_MULTIPLE = ("Value arguments that allow multiple values can be bound only to a list (or callable);"
                        " argument {0}, field {1}.")

    FILE_NOT_FOUND = "File not found: {0} and file_must_exist flag is set to True."
    FILE_MUST_EXIST = "open_file_read should not be called when file_must_exist flag is not set."
    DIRECTORY_NOT_FOUND = "Directory not found: {0} and directory_must_exist flag is set to True."

    FORMAT_LONGNAME_PREFIX = ("Only short argument names (single character) are allowed after single '-' character"
                              " (e.g. -v). For long names use double '-' format (e.g. '--ver'). Wrong argument is: {0}")
    FORMAT_SHORTNAME_PREFIX = ("If short name argument is used, it must be prefixed with single '-' character."
                               " Wrong argument is: {0}")
    FORMAT_SINGLE_HYPHEN = "Found character '-' not followed by an argument."
    FORMAT_SINGLE_SLASH = "Found character '/' not followed by an argument."
    FORMAT_DOUBLE_SLASH = "Invalid sequence \"//\" in the command line."

    GROUP_EMPTY = "Argument group is empty. Argument group must have at least one member."
    GROUP_ALL_OR_NONE_USED = "All or none of these arguments: {0} must be used."
    GROUP_ALL_USED = "All of these arguments: {0} must be used."
    GROUP_AT_LEAST_ONE_USED = "At least one of these arguments: {0} must be used."
    GROUP_EXACTLY_ONE_USED = "One (and only one) of these arguments: {0} must be used."
    GROUP_ONE_OR_NONE_USED = "These arguments can not be used together: {0}."
    GROUP_DISTINCT = "None of these arguments: {0} can be used together with any of these: {1}."
    GROUP_REQUIRED_BY_ANOTHER_ARGUMENT = "Argument: {0} requires the following arguments: {1}."

    MSG_ADDITIONAL_ARGUMENTS = "Additional arguments:"
    MSG_COMMAND_LINE = "Command line:"
    MSG_EXAMPLE_FORMAT = "Example: {0}"
    MSG_NOT_PARSED_ARGUMENTS = "Arguments not specified:"
    MSG_OPTIONAL = "[optional]"
    MSG_PARSED_ARGUMENTS = "Parsed arguments:"
    MSG_PARSING_RESULTS = "Parsing results:"
    MSG_USAGE = "Usage:"
