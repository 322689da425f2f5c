''' Style sheet for HTML uncertainty reports '''

css = '''
body {
  font-family: sans-serif;
  font-size: 16px;
  line-height: 1.6;
  padding: 1em;
  margin: auto;
  max-width: 48em;
}

h1, h2, h3 {
  font-family: sans-serif;
  line-height: 125%;
  margin-top: 1.5em;
  font-weight: normal;
}

h1 {
  font-size: 2em;
}

h2 {
  font-size: 1.5em;
}

h3 {
  font-size: 1.2em;
}

img {
  max-width: 100%;
}

pre, code {
  font-family: monospace;
}

table {
    margin: 10px 5px;
    border-collapse: collapse;
}

th {
    background-color: #eee;
    font-weight: bold;
}

th, td {
    border: 1px solid lightgray;
    padding: .2em 1em;
}

td:nth-child(2) {
    text-align: right;
}'''
