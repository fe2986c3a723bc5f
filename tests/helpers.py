SAMPLE = (
    '127.0.0.1 - frank [10/Oct/2000:13:55:36 -0700] "GET /apache_pb.gif HTTP/1.0" 200 2326 '
    '"http://www.example.com/start.html" "Mozilla/4.08" 15'
)

OK, WARN, ERROR, RESET = "\x1b[92m", "\x1b[93m", "\x1b[91m", "\x1b[0m"


def make_line(host="127.0.0.1", status=200, size="2326", agent="Mozilla/4.08", code="15"):
    return (
        f'{host} - frank [10/Oct/2000:13:55:36 -0700] "GET /apache_pb.gif HTTP/1.0" {status} {size} '
        f'"http://www.example.com/start.html" "{agent}" {code}'
    )
