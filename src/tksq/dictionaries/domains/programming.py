"""Programming overlay: identifiers and tooling vocabulary."""

PROGRAMMING_ABBREVIATIONS = (
    ("function", "fn"),
    ("functions", "fns"),
    ("configuration", "config"),
    ("implementation", "impl"),
    ("application", "app"),
    ("repository", "repo"),
    ("directory", "dir"),
    ("environment", "env"),
    ("database", "db"),
    ("parameter", "param"),
    ("parameters", "params"),
    ("argument", "arg"),
    ("arguments", "args"),
    ("variable", "var"),
    ("variables", "vars"),
    ("information", "info"),
    ("documentation", "docs"),
    ("development", "dev"),
    ("production", "prod"),
    ("authentication", "auth"),
    ("authorization", "authz"),
    ("specification", "spec"),
    ("dependency", "dep"),
    ("dependencies", "deps"),
    ("initialize", "init"),
    ("initialization", "init"),
    ("message", "msg"),
    ("number", "num"),
    ("object", "obj"),
    ("reference", "ref"),
    ("temporary", "tmp"),
    ("library", "lib"),
    ("maximum", "max"),
    ("minimum", "min"),
    ("request", "req"),
    ("response", "resp"),
    ("utilities", "utils"),
    ("administrator", "admin"),
    ("performance", "perf"),
    ("management", "mgmt"),
    ("package", "pkg"),
    ("javascript", "JS"),
    ("typescript", "TS"),
)

PROGRAMMING_SUBSTITUTIONS = (
    ("pull request", "PR"),
    ("pull requests", "PRs"),
    ("command line interface", "CLI"),
    ("application programming interface", "API"),
    ("continuous integration", "CI"),
    ("continuous deployment", "CD"),
    ("source code", "code"),
    ("return value", "result"),
    ("error message", "error"),
    ("unit tests", "tests"),
    ("the following code", "this code"),
    ("in the codebase", "in code"),
)
