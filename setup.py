#!/usr/bin/env python

import timeit
from setuptools import setup, Command

cmdclass = {}

class Speed(Command):
    description = "run speed benchmarks"
    user_options = []
    boolean_options = []
    def initialize_options(self):
        pass
    def finalize_options(self):
        pass
    def run(self):
        def do(setup_statements, statement):
            # extracted from timeit.py
            t = timeit.Timer(stmt=statement,
                             setup="\n".join(setup_statements))
            # determine number so that 0.2 <= total time < 2.0
            for i in range(1, 10):
                number = 10**i
                x = t.timeit(number)
                if x >= 0.2:
                    break
            return x / number

        def abbrev(t):
            if t > 1.0:
                return "%.3fs" % t
            if t > 1e-3:
                return "%.1fms" % (t*1e3)
            return "%.1fus" % (t*1e6)

        for bits in [1024, 2048, 3072, 4096]:
            S1 = ("from srp6a import known_group, make_verifier, make_A,"
                  " make_client_key")
            S2 = "group = known_group(%d)" % bits
            S3 = "s, a = b'\\x01' * 16, b'\\x02' * 32"
            S4 = "A = make_A(a, group)"
            S5 = "B = make_verifier('bob', 'hunter2', s, group)"
            S6 = "v = make_verifier('alice', 'password', s, group)"
            S7 = "K = make_client_key('alice', 'password', s, a, A, B, group)"

            verifier = do([S1, S2, S3], S6)
            start = do([S1, S2, S3], S4)
            key = do([S1, S2, S3, S4, S5], S7)
            print("%5d-bit: msglen=%4d, verifier=%6s, A=%6s, key=%6s"
                  % (bits, bits // 8, abbrev(verifier), abbrev(start),
                     abbrev(key)))
cmdclass["speed"] = Speed

setup(name="srp6a",
      version="0.1.0",
      description="SRP-6a password-authenticated key exchange math (pure python)",
      package_dir={"": "src"},
      packages=["srp6a", "srp6a.test"],
      license="MIT",
      cmdclass=cmdclass,
      classifiers=[
          "Intended Audience :: Developers",
          "License :: OSI Approved :: MIT License",
          "Programming Language :: Python",
          "Programming Language :: Python :: 3",
          "Topic :: Security :: Cryptography",
          ],
      python_requires=">=3.7",
      install_requires=["hkdf"],
      extras_require={"test": ["pytest"]},
      )
