import numpy as np

from neuralnet import MLPClassifier, Labeled
from neuralnet.layers import Dense, Activation
from neuralnet.activations import HyperbolicTangent
from neuralnet.optimizer import Adam


def generate_xor_data(n):
    combos = np.array([list(map(int, format(i, f'0{n}b'))) for i in range(2**n)])
    labels = ["odd" if s % 2 else "even" for s in np.sum(combos, axis=1)]
    return Labeled(combos.astype(float), labels)


def test(n, n_hidden, lr, epochs):
    dataset = generate_xor_data(n)

    model = MLPClassifier(
        hidden=[Dense(n_hidden), Activation(HyperbolicTangent())],
        batch_size=2**n,
        optimizer=Adam(lr),
        epochs=epochs,
        min_change=0.0,
        seed=0,
        verbose=1,
    )

    model.train(dataset)

    print(f"Predicting XOR for {n} inputs:")
    print(f"XOR-{n} Predictions:", model.predict(dataset))
    print(f"Accuracy: {model.score(dataset) * 100:.2f}%")


if __name__ == "__main__":
    test(n=2, n_hidden=4, lr=0.05, epochs=2_000)
    test(n=3, n_hidden=8, lr=0.05, epochs=2_000)
    test(n=4, n_hidden=16, lr=0.02, epochs=3_000)
