"""Wire a service through a factory function and through a named lambda.

    python examples/inject_into_constructor.py
"""

import logging
from types import SimpleNamespace

from wirebox import create_container


class ServiceClass:
    def __init__(self, ref1):
        self.ref1 = ref1

    def f2(self):
        print(self.ref1.f1())


def service1(ref1):
    return ServiceClass(ref1)


def main():
    logging.basicConfig(level=logging.INFO)
    container = create_container(logger=logging.getLogger("example"))
    (
        container
        .add_ref("ref1", SimpleNamespace(f1=lambda: "Ok"))
        .register(service1)
        .register(lambda ref1: ServiceClass(ref1), "service2")
    )
    container.service1.f2()
    container.service2.f2()

    # Swap the implementation; both services already hold the swappable ref1.
    container.add_ref("ref1", SimpleNamespace(f1=lambda: "Swapped"))
    container.service1.f2()
    container.service2.f2()


if __name__ == "__main__":
    main()
