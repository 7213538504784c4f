# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""
Standalone HTML report showing the input sequence and its six frame
translations.
"""

from html import escape

from .logging import get_logger

logger = get_logger(__name__)

REPORT_TITLE = "SixSequences Translation Report"

STYLESHEET = """
body {
    font-family: Arial, sans-serif;
    background-color: #fafafa;
    padding: 20px;
    line-height: 1.6;
}
.frame {
    margin-bottom: 20px;
    padding: 10px;
    background: white;
    border-radius: 8px;
    box-shadow: 0 0 6px rgba(0,0,0,0.1);
}
.frame-title {
    font-size: 20px;
    font-weight: bold;
    margin-bottom: 5px;
}
.seq {
    font-family: monospace;
    white-space: pre-wrap;
    word-wrap: break-word;
    color: #333;
}
.footer {
    margin-top: 40px;
    text-align: center;
    color: #777;
}
"""

HEADER_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>{title}</title>
<style>{stylesheet}</style>
</head>
<body>

<h1>{title}</h1>
<p><strong>Input Sequence Length:</strong> {length} bp</p>

<h2>Original DNA/RNA Sequence</h2>
<div class="frame">
<pre class="seq">{sequence}</pre>
</div>
"""

FRAME_TEMPLATE = """<div class="frame">
<div class="frame-title">Frame {frame_number} ({strand}{offset})</div>
<pre class="seq">{amino_acids}</pre>
</div>
"""

FOOTER = """<div class="footer">Generated by SixSequences</div>
</body>
</html>
"""


def render_html_report(sequence, frame_translations):
    """
    Parameters
    ----------
    sequence : str
        Nucleotide sequence which was translated.

    frame_translations : list of FrameTranslation

    Returns str
    """
    parts = [
        HEADER_TEMPLATE.format(
            title=REPORT_TITLE,
            stylesheet=STYLESHEET,
            length=len(sequence),
            sequence=escape(sequence))
    ]
    for x in frame_translations:
        parts.append(FRAME_TEMPLATE.format(
            frame_number=x.frame_number,
            strand=escape(x.strand),
            offset=x.offset,
            amino_acids=escape(x.amino_acids)))
    parts.append(FOOTER)
    return "\n".join(parts)


def write_html_report(path, sequence, frame_translations):
    with open(path, "w") as f:
        f.write(render_html_report(sequence, frame_translations))
    logger.info("Wrote HTML report to %s", path)
