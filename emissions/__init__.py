"""
Lifecycle CO2 comparison engine: ICE vs BEV.

Computation package. Only emissions/services/ imports Flask; the rest
is pure functions and records usable from the CLI or tests.

Modules:
    constants   - Heuristic coefficients and default emission factors
    heuristics  - Parameter estimates from curb weight
    records     - Immutable input / result records
    calculator  - Intensities, break-even and cumulative series
    parsing     - Form / JSON boundary validation
    export      - CSV serializer
    chart       - Matplotlib chart renderer
    share       - Share-URL query encoding
    report      - Human-readable summaries for display
    errors      - ValidationError / DomainError
    cli         - Command-line entry point
    services    - Service ABC, registry and the comparison service

IMPORTANT: No unicode characters allowed (Windows charmap constraint).
"""
