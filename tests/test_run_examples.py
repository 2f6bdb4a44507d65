"""Test module to run examples from the examples.svg package

The tests are run using pytest.
"""

from examples.svg import svg_path_group_page


def test_examples_svg_path_group_page(capsys):
    """Test function for svg_path_group_page example"""
    svg_path_group_page.main()
    output = capsys.readouterr().out
    assert "group bound:" in output
    assert "<svg" in output
