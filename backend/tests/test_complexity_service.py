import pytest

from codeshelf.domain.services.complexity_service import (
    ComplexityAnalysisService,
    analyze_complexity,
)

SINGLE_LOOP = """for (let i = 0; i < n; i++) {
  total += i;
}"""

NESTED_LOOPS = """for (let i = 0; i < n; i++) {
  for (let j = 0; j < n; j++) {
    total += i * j;
  }
}"""

TRIPLE_LOOPS = """for (let i = 0; i < n; i++) {
  for (let j = 0; j < n; j++) {
    for (let k = 0; k < n; k++) {
      total += i * j * k;
    }
  }
}"""

QUADRUPLE_LOOPS = """for (let a = 0; a < n; a++) {
  for (let b = 0; b < n; b++) {
    for (let c = 0; c < n; c++) {
      while (d < n) {
        d++;
      }
    }
  }
}"""

SEQUENTIAL_LOOPS = """for (let i = 0; i < n; i++) {
  a += i;
}
for (let j = 0; j < n; j++) {
  b += j;
}"""


@pytest.fixture
def analyzer():
    return ComplexityAnalysisService()


def test_no_signals_falls_back_to_constant(analyzer):
    result = analyzer.analyze("const x = 1;\nreturn x;")
    assert result.estimated_complexity == "O(1)"
    assert result.confidence == 0.3
    assert result.reasoning == ["No complex patterns detected"]
    assert result.patterns == []


def test_empty_code(analyzer):
    result = analyzer.analyze("")
    assert result.estimated_complexity == "O(1)"
    assert result.confidence == 0.3


def test_single_loop(analyzer):
    result = analyzer.analyze(SINGLE_LOOP)
    assert result.estimated_complexity == "O(n)"
    assert result.confidence == 0.8
    assert result.patterns == ["Single Loop"]


def test_nested_loops(analyzer):
    result = analyzer.analyze(NESTED_LOOPS)
    assert result.estimated_complexity == "O(n²)"
    assert result.confidence == 0.9
    assert result.patterns == ["Nested Loops"]


def test_triple_nested_loops(analyzer):
    result = analyzer.analyze(TRIPLE_LOOPS)
    assert result.estimated_complexity == "O(n³)"
    assert result.confidence == 0.95


def test_deeper_nesting_uses_caret_notation(analyzer):
    result = analyzer.analyze(QUADRUPLE_LOOPS)
    assert result.estimated_complexity == "O(n^4)"
    assert result.confidence == 0.95
    assert result.patterns == ["4-Level Nested Loops"]


def test_sequential_loops_report_multiple_loops(analyzer):
    result = analyzer.analyze(SEQUENTIAL_LOOPS)
    assert result.estimated_complexity == "O(n²)"
    assert result.confidence == 0.8
    assert result.patterns == ["Multiple Loops"]


def test_nested_loops_dominate_sorting(analyzer):
    code = NESTED_LOOPS + "\nitems.sort();"
    result = analyzer.analyze(code)
    assert result.patterns == ["Nested Loops", "Sorting"]
    assert result.estimated_complexity == "O(n²)"
    assert result.confidence == 0.9


def test_sorting_alone(analyzer):
    result = analyzer.analyze("items.sort((a, b) => a - b);")
    assert result.estimated_complexity == "O(n log n)"
    assert result.confidence == 0.9


def test_commented_loop_is_ignored(analyzer):
    code = "// for (let i = 0; i < n; i++) {\n# while (true) {\nreturn 1;"
    result = analyzer.analyze(code)
    assert result.estimated_complexity == "O(1)"
    assert result.patterns == []


def test_hash_table_only_reports_its_own_confidence(analyzer):
    result = analyzer.analyze("const seen = new Set();")
    assert result.estimated_complexity == "O(1)"
    assert result.confidence == 0.7
    assert result.reasoning == ["Detected Hash Table (O(1))"]


def test_recursive_function(analyzer):
    code = "function fact(n) {\n  if (n <= 1) return 1;\n  return n * fact(n - 1);\n}"
    result = analyzer.analyze(code)
    assert result.patterns == ["Recursive Function"]
    assert result.estimated_complexity == "O(n)"
    assert result.confidence == 0.6


def test_python_def_is_not_a_recursion_signal(analyzer):
    code = "def fact(n):\n    return n * fact(n - 1)"
    assert analyzer.analyze(code).patterns == []


def test_reasoning_is_ordered_by_confidence(analyzer):
    code = (
        "const index = new Map();\n"
        "for (const item of items) {\n"
        "  index.set(item.key, item);\n"
        "}\n"
        "visitTree(index);"
    )
    result = analyzer.analyze(code)
    assert result.patterns == ["Single Loop", "Hash Table", "Tree Traversal"]
    assert result.reasoning == [
        "Detected Single Loop (O(n))",
        "Detected Hash Table (O(1))",
        "Detected Tree Traversal (O(n))",
    ]
    assert result.estimated_complexity == "O(n)"
    assert result.confidence == 0.8


def test_equal_power_keeps_more_confident_pattern(analyzer):
    code = "while (lo <= hi) {\n  mid = binaryMid(lo, hi);\n}\nconst doubled = values.map(v => v * 2);"
    result = analyzer.analyze(code)
    assert result.patterns == ["Single Loop", "Binary Search", "Array Map"]
    assert result.estimated_complexity == "O(n)"
    assert result.confidence == 0.8


def test_analysis_is_idempotent(analyzer):
    code = NESTED_LOOPS + "\nconst seen = new Set();"
    assert analyzer.analyze(code) == analyzer.analyze(code)


def test_language_does_not_change_result(analyzer):
    assert analyzer.analyze(NESTED_LOOPS, "python") == analyzer.analyze(NESTED_LOOPS, "javascript")


def test_empty_detector_pipeline_always_falls_back():
    result = ComplexityAnalysisService(detectors=[]).analyze(TRIPLE_LOOPS)
    assert result.estimated_complexity == "O(1)"
    assert result.confidence == 0.3


def test_module_level_helper():
    result = analyze_complexity(SINGLE_LOOP)
    assert result.to_dict() == {
        "estimatedComplexity": "O(n)",
        "confidence": 0.8,
        "reasoning": ["Detected Single Loop (O(n))"],
        "patterns": ["Single Loop"],
    }
