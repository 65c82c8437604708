class JavaParsingConstants:
    # Declarations that can carry resource methods
    CLASS_NODE_TYPES = {
        "class_declaration",
        "interface_declaration",
        "enum_declaration",
        "record_declaration",
    }

    CLASS_BODY_TYPES = {
        "class_body",
        "interface_body",
        "enum_body",
    }

    ANNOTATION_NODE_TYPES = {
        "annotation",
        "marker_annotation",
    }

    METHOD_NODE_TYPE = "method_declaration"
    ANNOTATION_TYPE_NODE_TYPE = "annotation_type_declaration"

    # Unnamed annotation argument, e.g. @Path("/users")
    DEFAULT_MEMBER = "value"

    # Java escape sequences in string literals
    SIMPLE_ESCAPES = {
        "b": "\b",
        "t": "\t",
        "n": "\n",
        "f": "\f",
        "r": "\r",
        "s": " ",
        '"': '"',
        "'": "'",
        "\\": "\\",
    }


class JavaCodeAnalyzerConstant:
    JAVA_EXTENSION = "*.java"

    EXCLUDED_DIRECTORIES = {
        ".git", ".idea", ".gradle", ".mvn", "target", "build", "node_modules", "out",
    }
