import pytest

SAMPLE_HTML = """
<html>
<body>
  <table>
    <tr><th>Category</th><th>GST Rate</th></tr>
    <tr><td>Milk and Cream</td><td>5%</td></tr>
    <tr><td>Tea</td><td>5%</td></tr>
    <tr><td>Mobile Phones</td><td>18%</td></tr>
    <tr><td>Fresh vegetables</td><td>Exempt</td></tr>
    <tr><td>Only one cell</td></tr>
    <tr><td>   </td><td>12%</td></tr>
  </table>
  <table>
    <tr><td>Gold &amp; Silver Jewellery</td><td> 3 % </td></tr>
    <tr><td>Cement</td><td>28%</td></tr>
  </table>
</body>
</html>
"""


class FakeHttpClient:
    """Devuelve HTML fijo y registra las URLs pedidas."""

    def __init__(self, html=SAMPLE_HTML, error=None):
        self.html = html
        self.error = error
        self.urls = []

    def get(self, url):
        self.urls.append(url)
        if self.error:
            raise self.error
        return self.html


@pytest.fixture
def sample_html():
    return SAMPLE_HTML


@pytest.fixture
def fake_http():
    return FakeHttpClient()
